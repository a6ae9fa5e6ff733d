import unittest
from unittest.mock import Mock

from checkhost_proxy.checks.results import PENDING_MESSAGE
from checkhost_proxy.clients.check_host import CheckHostClientError
from checkhost_proxy.poller import PollPolicy, poll_results, results_ready

NOT_READY = {
    "ir1.node.check-host.net": None,
    "ir2.node.check-host.net": None,
}
READY = {
    "ir1.node.check-host.net": [[["OK", 0.044, "93.184.216.34"]]],
    "ir2.node.check-host.net": None,
}


class ResultsReadyTests(unittest.TestCase):
    def test_empty_result_set_is_not_ready(self) -> None:
        self.assertFalse(results_ready({}))

    def test_all_null_result_set_is_not_ready(self) -> None:
        self.assertFalse(results_ready(NOT_READY))

    def test_one_reported_node_is_ready(self) -> None:
        self.assertTrue(results_ready(READY))

    def test_falsy_but_non_null_value_counts_as_reported(self) -> None:
        self.assertTrue(results_ready({"ir1.node.check-host.net": []}))

    def test_non_dict_is_not_ready(self) -> None:
        self.assertFalse(results_ready(None))
        self.assertFalse(results_ready(["x"]))


class PollResultsTests(unittest.TestCase):
    def test_all_null_exhausts_budget_as_pending(self) -> None:
        fetch = Mock(return_value=NOT_READY)
        sleep = Mock()

        outcome = poll_results("abc123", fetch=fetch, sleep=sleep)

        self.assertEqual(outcome.status, "pending")
        self.assertEqual(outcome.message, PENDING_MESSAGE)
        self.assertIsNone(outcome.data)
        self.assertEqual(outcome.attempts, 60)
        self.assertEqual(fetch.call_count, 60)
        self.assertEqual(sleep.call_count, 59)
        sleep.assert_called_with(1.0)
        fetch.assert_called_with("abc123")

    def test_stops_at_first_ready_attempt(self) -> None:
        fetch = Mock(side_effect=[NOT_READY, {}, READY, READY])
        sleep = Mock()

        outcome = poll_results("abc123", fetch=fetch, sleep=sleep)

        self.assertEqual(outcome.status, "ok")
        self.assertIs(outcome.data, READY)
        self.assertEqual(outcome.attempts, 3)
        self.assertEqual(fetch.call_count, 3)
        self.assertEqual(sleep.call_count, 2)

    def test_ready_on_last_attempt(self) -> None:
        fetch = Mock(side_effect=[NOT_READY] * 4 + [READY])

        outcome = poll_results(
            "abc123", fetch=fetch, policy=PollPolicy(max_attempts=5, interval_s=0.5), sleep=Mock()
        )

        self.assertEqual(outcome.status, "ok")
        self.assertEqual(outcome.attempts, 5)

    def test_fetch_errors_are_swallowed_and_counted(self) -> None:
        fetch = Mock(
            side_effect=[
                CheckHostClientError("check-host.net timed out", kind="transport"),
                CheckHostClientError("check-host.net returned non-JSON response", kind="decode"),
                READY,
            ]
        )

        outcome = poll_results("abc123", fetch=fetch, sleep=Mock())

        self.assertEqual(outcome.status, "ok")
        self.assertEqual(outcome.fetch_errors, 2)

    def test_persistent_fetch_errors_end_pending_not_error(self) -> None:
        fetch = Mock(side_effect=CheckHostClientError("down", kind="transport"))

        outcome = poll_results(
            "abc123", fetch=fetch, policy=PollPolicy(max_attempts=3, interval_s=1.0), sleep=Mock()
        )

        self.assertEqual(outcome.status, "pending")
        self.assertEqual(outcome.fetch_errors, 3)
        self.assertEqual(outcome.http_status, 200)


if __name__ == "__main__":
    unittest.main()
