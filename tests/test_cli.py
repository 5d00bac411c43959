import unittest

from swapi_digest.cli import apply_cli_args
from swapi_digest.config import Settings


class TestCli(unittest.TestCase):
    def _settings(self):
        return Settings(debug=True, timeout_ms=5000, verify_tls=True)

    def test_no_flags_keeps_settings(self):
        s = apply_cli_args(self._settings(), [])
        self.assertTrue(s.debug)
        self.assertEqual(s.timeout_ms, 5000)

    def test_no_debug(self):
        s = apply_cli_args(self._settings(), ["--no-debug"])
        self.assertFalse(s.debug)

    def test_timeout_override(self):
        s = apply_cli_args(self._settings(), ["--timeout", "1200", "--no-debug"])
        self.assertEqual(s.timeout_ms, 1200)
        self.assertFalse(s.debug)

    def test_trailing_timeout_without_value_is_ignored(self):
        s = apply_cli_args(self._settings(), ["--no-debug", "--timeout"])
        self.assertEqual(s.timeout_ms, 5000)

    def test_bad_timeout_values_are_ignored(self):
        self.assertEqual(apply_cli_args(self._settings(), ["--timeout", "soon"]).timeout_ms, 5000)
        self.assertEqual(apply_cli_args(self._settings(), ["--timeout", "0"]).timeout_ms, 5000)

    def test_abbreviated_flags_are_not_recognised(self):
        s = apply_cli_args(self._settings(), ["--no", "--time", "10"])
        self.assertTrue(s.debug)
        self.assertEqual(s.timeout_ms, 5000)

    def test_insecure_and_unknown_flags(self):
        s = apply_cli_args(self._settings(), ["--insecure", "--verbose"])
        self.assertFalse(s.verify_tls)


if __name__ == "__main__":
    unittest.main()
