"""Fixed-brightness RGB LED demo for the Nexys A7-100T."""

from absl import app
from amaranth import *
from amaranth.build import *

from rgb_pwm.board.nexysa7100t import nexysa7100t
from rgb_pwm.core import config as config_flags
from rgb_pwm.core import pwm
from rgb_pwm.core import rgb_led
from rgb_pwm.core import top
from rgb_pwm.core import util


class RGBLedDemo(Elaboratable):
    """Drive RGB LED 0 at the brightness given by --duty.

    Switch 0 enables the PWM outputs and the center button resets them. Both
    are fed to the core unsynchronized; it synchronizes them itself.
    """

    def __init__(self):
        super().__init__()
        self.led = None

    def elaborate(self, platform: Platform) -> Module:
        m = Module()
        config = config_flags.ResolveFromFlags(util.GetClockFreq(platform))
        m.submodules.led = led = self.led = rgb_led.RGBLed(config)

        enable = platform.request('switch', 0)
        reset = platform.request('button_center')
        m.d.comb += led.enable.eq(enable.i)
        m.d.comb += led.reset.eq(reset.i)

        rgb = platform.request('rgb_led', 0)
        m.d.comb += rgb.r.o.eq(led.outputs[pwm.Channel.RED])
        m.d.comb += rgb.g.o.eq(led.outputs[pwm.Channel.GREEN])
        m.d.comb += rgb.b.o.eq(led.outputs[pwm.Channel.BLUE])
        return m


def main(_):
    top.build(nexysa7100t.NexysA7100TPlatform(), RGBLedDemo())

if __name__ == "__main__":
    app.run(main)
