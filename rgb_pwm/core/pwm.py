"""Fixed-configuration pulse-width modulation (PWM)."""

import enum
from typing import List

from amaranth import *
from amaranth.build import *

from rgb_pwm.core import timing


class Channel(enum.IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2


class PWM(Elaboratable):
    """Single PWM channel with a fixed period and high time.

    The period of the PWM output is total_ticks cycles, of which the first
    high_ticks are high. While reset is set the counter is cleared; while enable
    is clear the counter holds its value, so that the waveform resumes from the
    same phase once enabled again. The output is low in both cases.

    The output for a cycle is decided from the counter value at the start of
    that cycle. The strobe signal strobes on the last cycle of each period.
    """

    def __init__(self, total_ticks: int, high_ticks: int):
        super().__init__()
        assert total_ticks >= 1
        assert 0 <= high_ticks <= total_ticks
        self.total_ticks = total_ticks
        self.high_ticks = high_ticks
        self.reset = Signal()
        self.enable = Signal()
        self.counter = Signal(range(total_ticks), init=0)
        self.strobe = Signal()
        self.output = Signal()

    def elaborate(self, _: Platform) -> Module:
        m = Module()
        last = Signal()
        m.d.comb += last.eq(self.counter == self.total_ticks - 1)
        with m.If(self.reset):
            m.d.sync += self.counter.eq(0)
        with m.Elif(self.enable):
            m.d.comb += self.output.eq(self.counter < self.high_ticks)
            m.d.comb += self.strobe.eq(last)
            with m.If(last):
                m.d.sync += self.counter.eq(0)
            with m.Else():
                m.d.sync += self.counter.eq(self.counter + 1)
        return m


class RGBPWM(Elaboratable):
    """Three independent PWM channels sharing a reset and an enable."""

    def __init__(self, config: timing.PeriodConfig):
        super().__init__()
        assert len(config.high_ticks) == len(Channel)
        self.config = config
        self.reset = Signal()
        self.enable = Signal()
        self.channels: List[PWM] = [
            PWM(config.total_ticks, config.high_ticks[c]) for c in Channel]
        self.outputs = [pwm.output for pwm in self.channels]
        self.counters = [pwm.counter for pwm in self.channels]
        self.strobes = [pwm.strobe for pwm in self.channels]

    def elaborate(self, _: Platform) -> Module:
        m = Module()
        for c, pwm in zip(Channel, self.channels):
            m.submodules[c.name.lower()] = pwm
            m.d.comb += pwm.reset.eq(self.reset)
            m.d.comb += pwm.enable.eq(self.enable)
        return m
