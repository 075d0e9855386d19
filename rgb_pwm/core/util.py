"""Language-level utilities for Amaranth."""

from typing import Optional

from amaranth.build import Platform

from rgb_pwm.test import util as test_util


def GetClockFreq(platform: Optional[Platform]) -> int:
    """The sync clock frequency, or the simulation clock without a platform."""
    if platform is not None:
        return int(platform.default_clk_frequency)
    return test_util.SIMULATION_CLOCK_FREQUENCY
