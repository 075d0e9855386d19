"""PWM brightness control for a single RGB LED."""

from amaranth import *
from amaranth.build import *

from rgb_pwm.core import pwm as pwm_module
from rgb_pwm.core import synchronizer
from rgb_pwm.core import timing


class RGBLed(Elaboratable):
    """Drive the three color channels of an LED at fixed brightness.

    The raw reset and enable inputs may come straight from pins: each passes
    through its own two-stage synchronizer before reaching the PWM channels,
    so a change on either input takes effect two cycles later.
    """

    def __init__(self, config: timing.PeriodConfig):
        super().__init__()
        self.config = config
        self.reset = Signal()
        self.enable = Signal()
        self.sync_reset = Signal()
        self.sync_enable = Signal()
        self.pwm = pwm_module.RGBPWM(config)
        self.outputs = self.pwm.outputs
        self.counters = self.pwm.counters

    def elaborate(self, _: Platform) -> Module:
        m = Module()
        m.submodules.reset_sync = reset_sync = synchronizer.Synchronizer(
            self.reset)
        m.submodules.enable_sync = enable_sync = synchronizer.Synchronizer(
            self.enable)
        m.submodules.pwm = self.pwm
        m.d.comb += [
            self.sync_reset.eq(reset_sync.output),
            self.sync_enable.eq(enable_sync.output),
            self.pwm.reset.eq(self.sync_reset),
            self.pwm.enable.eq(self.sync_enable),
        ]
        return m
