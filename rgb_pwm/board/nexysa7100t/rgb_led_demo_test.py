"""Tests for rgb_pwm.board.nexysa7100t.rgb_led_demo."""

import types
import unittest

from absl import flags
from absl.testing import flagsaver
from amaranth import *
from amaranth.hdl import Fragment

try:
    from rgb_pwm.board.nexysa7100t import rgb_led_demo
except ImportError:  # amaranth-boards is only in the boards extra
    rgb_led_demo = None

FLAGS = flags.FLAGS


class FakePlatform(object):
    """Just enough of a platform to elaborate the demo."""

    def __init__(self, default_clk_frequency: float):
        super().__init__()
        self.default_clk_frequency = default_clk_frequency
        self.requested = []

    def request(self, name, number=0):
        self.requested.append((name, number))
        if name == 'rgb_led':
            return types.SimpleNamespace(
                **{color: types.SimpleNamespace(o=Signal(name=f'{color}_o'))
                   for color in 'rgb'})
        return types.SimpleNamespace(i=Signal(name=f'{name}_i'))


@unittest.skipIf(rgb_led_demo is None, 'amaranth-boards is not installed')
class RGBLedDemoTest(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        if not FLAGS.is_parsed():
            FLAGS.mark_as_parsed()

    def test_elaborate(self):
        platform = FakePlatform(12e6)
        demo = rgb_led_demo.RGBLedDemo()
        Fragment.get(demo, platform)
        self.assertEqual(demo.led.config.clk_freq_hz, 12_000_000)
        self.assertEqual(demo.led.config.total_ticks, 600)
        self.assertEqual(demo.led.config.high_ticks, (131, 0, 131))
        self.assertCountEqual(platform.requested, [
            ('switch', 0), ('button_center', 0), ('rgb_led', 0)])

    @flagsaver.flagsaver(pwm_freq_hz=10_000, duty=['1000', '500', '0'])
    def test_duty_flags(self):
        demo = rgb_led_demo.RGBLedDemo()
        Fragment.get(demo, FakePlatform(100e6))
        self.assertEqual(demo.led.config.total_ticks, 10_000)
        self.assertEqual(demo.led.config.high_ticks, (10_000, 5_000, 0))


if __name__ == '__main__':
    unittest.main()
