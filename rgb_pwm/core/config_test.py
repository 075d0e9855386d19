"""Tests for rgb_pwm.core.config."""

import unittest

from absl import app
from absl import flags
from absl.testing import flagsaver

from rgb_pwm.core import config as config_flags

FLAGS = flags.FLAGS


class ResolveFromFlagsTest(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        if not FLAGS.is_parsed():
            FLAGS.mark_as_parsed()

    def test_defaults(self):
        config = config_flags.ResolveFromFlags(100_000_000)
        self.assertEqual(config.total_ticks, 5000)
        self.assertEqual(config.high_ticks, (1090, 0, 1090))

    @flagsaver.flagsaver(pwm_freq_hz=10_000, duty=['1000', '1', '0'])
    def test_overrides(self):
        config = config_flags.ResolveFromFlags(50_000_000)
        self.assertEqual(config.total_ticks, 5000)
        self.assertEqual(config.high_ticks, (5000, 5, 0))

    @flagsaver.flagsaver(duty=['5', 'x', '7'])
    def test_malformed_duty(self):
        with self.assertRaises(app.UsageError):
            config_flags.ResolveFromFlags(100_000_000)

    @flagsaver.flagsaver(duty=['5', '1001', '7'])
    def test_invalid_duty(self):
        with self.assertRaises(app.UsageError):
            config_flags.ResolveFromFlags(100_000_000)

    @flagsaver.flagsaver(pwm_freq_hz=20_000_000)
    def test_period_too_short(self):
        with self.assertRaises(app.UsageError):
            config_flags.ResolveFromFlags(1_000_000)


if __name__ == '__main__':
    unittest.main()
