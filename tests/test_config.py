import os
import unittest
from unittest.mock import patch

from checkhost_proxy.config import _positive_int


class ConfigTests(unittest.TestCase):
    def test_poll_attempts_default(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("CHECK_POLL_MAX_ATTEMPTS", None)
            self.assertEqual(_positive_int("CHECK_POLL_MAX_ATTEMPTS", 60), 60)

    def test_poll_attempts_clamped_to_one(self) -> None:
        for raw in ("0", "-5"):
            with self.subTest(raw=raw):
                with patch.dict(os.environ, {"CHECK_POLL_MAX_ATTEMPTS": raw}):
                    self.assertEqual(_positive_int("CHECK_POLL_MAX_ATTEMPTS", 60), 1)

    def test_poll_attempts_from_env(self) -> None:
        with patch.dict(os.environ, {"CHECK_POLL_MAX_ATTEMPTS": "12"}):
            self.assertEqual(_positive_int("CHECK_POLL_MAX_ATTEMPTS", 60), 12)


if __name__ == "__main__":
    unittest.main()
