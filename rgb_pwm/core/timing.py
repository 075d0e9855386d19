"""Configuration-time PWM timing parameters.

All arithmetic here is exact: frequencies and duty cycles are combined as
rationals and only rounded once, at the very end.
"""

import fractions
import math
import numbers
from typing import NamedTuple, Sequence, Tuple

from absl import logging


NUM_CHANNELS = 3
# Duty cycles are given in 0.1% steps
DUTY_SCALE = 1000
RECOMMENDED_PWM_FREQ_HZ = (10_000, 20_000)
CLK_FREQ_RANGE_HZ = (50_000, 200_000_000)


class ConfigurationError(ValueError):
    pass


class PeriodConfig(NamedTuple):
    """Resolved PWM period, in ticks of the reference clock."""
    clk_freq_hz: int
    total_ticks: int
    high_ticks: Tuple[int, ...]

    @property
    def pwm_freq_hz(self) -> fractions.Fraction:
        """The realized PWM frequency."""
        return fractions.Fraction(self.clk_freq_hz, self.total_ticks)

    def low_ticks(self, channel: int) -> int:
        return self.total_ticks - self.high_ticks[channel]

    def duty(self, channel: int) -> fractions.Fraction:
        """The realized duty cycle of channel, as a fraction of one."""
        return fractions.Fraction(self.high_ticks[channel], self.total_ticks)


def RoundHalfUp(q: fractions.Fraction) -> int:
    return math.floor(q + fractions.Fraction(1, 2))


def _CheckInteger(name: str, value) -> int:
    # bool is an Integral, but never a meaningful frequency or duty
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise ConfigurationError(f'{name} must be an integer, got {value!r}')
    return int(value)


def CheckClockFrequency(clk_freq_hz: int):
    """Enforce the supported reference clock range for real hardware."""
    clk_freq_hz = _CheckInteger('clk_freq_hz', clk_freq_hz)
    lo, hi = CLK_FREQ_RANGE_HZ
    if not lo <= clk_freq_hz <= hi:
        raise ConfigurationError(
            f'clk_freq_hz must be in [{lo}, {hi}], got {clk_freq_hz}')


def Resolve(clk_freq_hz: int, pwm_freq_hz: int,
            duty: Sequence[int]) -> PeriodConfig:
    """Turn frequencies and per-channel duty cycles into tick counts.

    The period is rounded to the nearest whole tick (ties round up), so the
    realized PWM frequency is as close as possible to the requested one. The
    high time is rounded up, so any non-zero duty cycle yields at least one
    high tick per period.
    """
    clk_freq_hz = _CheckInteger('clk_freq_hz', clk_freq_hz)
    pwm_freq_hz = _CheckInteger('pwm_freq_hz', pwm_freq_hz)
    if clk_freq_hz <= 0:
        raise ConfigurationError(
            f'clk_freq_hz must be positive, got {clk_freq_hz}')
    if pwm_freq_hz <= 0:
        raise ConfigurationError(
            f'pwm_freq_hz must be positive, got {pwm_freq_hz}')
    try:
        duty = list(duty)
    except TypeError as e:
        raise ConfigurationError(
            f'duty must be a sequence of {NUM_CHANNELS} integers, '
            f'got {duty!r}') from e
    if len(duty) != NUM_CHANNELS:
        raise ConfigurationError(
            f'Expected {NUM_CHANNELS} duty cycles, got {len(duty)}')
    duty = [_CheckInteger(f'duty[{c}]', d) for c, d in enumerate(duty)]
    for c, d in enumerate(duty):
        if not 0 <= d <= DUTY_SCALE:
            raise ConfigurationError(
                f'duty[{c}] must be in [0, {DUTY_SCALE}], got {d}')

    total_ticks = RoundHalfUp(fractions.Fraction(clk_freq_hz, pwm_freq_hz))
    if total_ticks < 1:
        raise ConfigurationError(
            f'pwm_freq_hz {pwm_freq_hz} is too high for clk_freq_hz '
            f'{clk_freq_hz}: the period rounds to {total_ticks} ticks')
    high_ticks = tuple(
        math.ceil(fractions.Fraction(total_ticks * d, DUTY_SCALE))
        for d in duty)
    config = PeriodConfig(clk_freq_hz=clk_freq_hz, total_ticks=total_ticks,
                          high_ticks=high_ticks)

    lo, hi = RECOMMENDED_PWM_FREQ_HZ
    if not lo <= pwm_freq_hz <= hi:
        logging.warning(
            'pwm_freq_hz %d is outside the recommended range [%d, %d]',
            pwm_freq_hz, lo, hi)
    logging.info('PWM period: %d ticks (%.3f Hz), high ticks %s',
                 config.total_ticks, float(config.pwm_freq_hz),
                 list(config.high_ticks))
    return config
