"""Command-line flags for the PWM configuration."""

from typing import List

from absl import app
from absl import flags

from rgb_pwm.core import timing


flags.DEFINE_integer('pwm_freq_hz', 20_000, 'Target PWM frequency in Hz',
                     lower_bound=1)
flags.DEFINE_list('duty', ['218', '0', '218'],
                  'Red, green and blue duty cycles in 0.1% steps (0-1000)')

FLAGS = flags.FLAGS


def ParseDuty(duty: List[str]) -> List[int]:
    try:
        return [int(d) for d in duty]
    except ValueError as e:
        raise app.UsageError(f'Invalid --duty {",".join(duty)}: {e}') from e


def ResolveFromFlags(clk_freq_hz: int) -> timing.PeriodConfig:
    """Resolve --pwm_freq_hz and --duty against the given clock."""
    try:
        return timing.Resolve(clk_freq_hz, FLAGS.pwm_freq_hz,
                              ParseDuty(FLAGS.duty))
    except timing.ConfigurationError as e:
        raise app.UsageError(str(e)) from e
