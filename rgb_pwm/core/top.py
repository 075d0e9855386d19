"""Command-line entry-point for Platform.build."""

from absl import app
from absl import flags
from absl import logging
from amaranth import *
from amaranth.build import *

from rgb_pwm.core import timing
from rgb_pwm.core import util


flags.DEFINE_string('name', 'top', 'Top module name')
flags.DEFINE_string('build_dir', 'build', 'Build output directory')
flags.DEFINE_enum('action', 'build', ['elaborate', 'build', 'program'],
                  'Elaborate only, build the bitstream, or build and program')
flags.DEFINE_multi_string(
    'program_opts', None, 'Options to be passed to the backend toolchain')

FLAGS = flags.FLAGS


def build(platform: Platform, top: Elaboratable):
    clk_freq_hz = util.GetClockFreq(platform)
    try:
        timing.CheckClockFrequency(clk_freq_hz)
    except timing.ConfigurationError as e:
        raise app.UsageError(str(e)) from e
    logging.info('%s %s for %s (%d Hz)', FLAGS.action, FLAGS.name,
                 type(platform).__name__, clk_freq_hz)
    if FLAGS.action == 'elaborate':
        platform.prepare(top, FLAGS.name)
    elif FLAGS.action == 'build':
        plan = platform.prepare(top, FLAGS.name)
        plan.execute_local(FLAGS.build_dir)
    elif FLAGS.action == 'program':
        products = platform.build(top, name=FLAGS.name,
                                  build_dir=FLAGS.build_dir)
        platform.toolchain_program(products, FLAGS.name,
                                   **_ProgramOpts(FLAGS.program_opts))
    else:
        raise app.UsageError(f'Invalid action: {FLAGS.action}')


def _ProgramOpts(opts):
    """Parse repeated key=value flags into toolchain keyword arguments."""
    result = {}
    for opt in opts or []:
        key, sep, value = opt.partition('=')
        if not sep:
            raise app.UsageError(f'Expected key=value, got {opt!r}')
        result[key] = value
    return result
