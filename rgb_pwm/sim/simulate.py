"""Simulate the RGB LED PWM core and report the generated waveforms.

The run follows the usual bring-up sequence: hold reset, release reset with
the channels disabled, enable and wait for the enable synchronizer, count a
number of full periods, then disable again.

Counting is recorded as soon as the two-cycle synchronizer latency has passed
after enable rises, rather than after a longer settling delay, so the running
phase begins exactly on the first cycle of a period.
"""

from typing import Dict, NamedTuple, Optional, Sequence, Tuple

from absl import app
from absl import flags
from absl import logging

from rgb_pwm.core import config as config_flags
from rgb_pwm.core import pwm
from rgb_pwm.core import rgb_led
from rgb_pwm.core import timing
from rgb_pwm.test import test_util
from rgb_pwm.test import trace


flags.DEFINE_integer('clk_freq_hz', 100_000_000,
                     'Reference clock frequency in Hz',
                     lower_bound=timing.CLK_FREQ_RANGE_HZ[0],
                     upper_bound=timing.CLK_FREQ_RANGE_HZ[1])
flags.DEFINE_integer('periods', 5, 'Number of PWM periods to run',
                     lower_bound=1)
flags.DEFINE_integer('hold_ticks', 10,
                     'Cycles to spend in each of the reset, disabled and '
                     'stopped phases', lower_bound=0)
flags.DEFINE_string('vcd', None, 'VCD output path')
flags.DEFINE_string('gtkw', None, 'GTKWave save file output path')

FLAGS = flags.FLAGS

# Cycles between raising the raw enable and the first counting cycle
SYNC_LATENCY = 2

PHASES = ('reset', 'disabled', 'settle', 'running', 'stopped')


class SimulationResult(NamedTuple):
    config: timing.PeriodConfig
    phases: Dict[str, trace.Trace]
    # Counter values at the end of the run, after enable was dropped
    final_counters: Tuple[int, ...]


def Simulate(config: timing.PeriodConfig, periods: int, hold_ticks: int = 10,
             vcd_file: Optional[str] = None,
             gtkw_file: Optional[str] = None) -> SimulationResult:
    dut = rgb_led.RGBLed(config)
    sim = test_util.MakeSimulator(dut, config.clk_freq_hz)
    outputs = {c.name.lower(): dut.outputs[c] for c in pwm.Channel}
    phases = {name: trace.Trace(outputs) for name in PHASES}
    final_counters = []

    async def bench(ctx):
        ctx.set(dut.reset, 1)
        await phases['reset'].record(ctx, hold_ticks)
        ctx.set(dut.reset, 0)
        await phases['disabled'].record(ctx, hold_ticks)
        ctx.set(dut.enable, 1)
        await phases['settle'].record(ctx, SYNC_LATENCY)
        await phases['running'].record(ctx, periods * config.total_ticks)
        ctx.set(dut.enable, 0)
        await phases['stopped'].record(ctx, hold_ticks)
        final_counters.extend(test_util.GetList(ctx, dut.counters))

    sim.add_testbench(bench)
    if vcd_file is not None:
        traces = [dut.reset, dut.enable, dut.sync_reset, dut.sync_enable,
                  *dut.outputs, *dut.counters]
        with sim.write_vcd(vcd_file, gtkw_file, traces=traces):
            sim.run()
    else:
        sim.run()
    return SimulationResult(config, phases, tuple(final_counters))


def CountPeriods(samples: Sequence[int], config: timing.PeriodConfig,
                 channel: int) -> int:
    """Count the whole periods of samples with exactly the expected waveform.

    The samples must start on the first cycle of a period.
    """
    total = config.total_ticks
    expected = ([1] * config.high_ticks[channel] +
                [0] * config.low_ticks(channel))
    return sum(1 for start in range(0, len(samples) - total + 1, total)
               if list(samples[start:start + total]) == expected)


def main(argv):
    if len(argv) > 1:
        raise app.UsageError('Too many command-line arguments.')
    config = config_flags.ResolveFromFlags(FLAGS.clk_freq_hz)
    result = Simulate(config, FLAGS.periods, hold_ticks=FLAGS.hold_ticks,
                      vcd_file=FLAGS.vcd, gtkw_file=FLAGS.gtkw)
    running = result.phases['running']
    for c in pwm.Channel:
        name = c.name.lower()
        high = sum(running.samples(name))
        logging.info('%s: duty %.1f%%, %d high / %d low cycles, %d/%d periods '
                     'of (%d high, %d low)', name, 100 * float(config.duty(c)),
                     high, len(running) - high,
                     CountPeriods(running.samples(name), config, c),
                     FLAGS.periods, config.high_ticks[c], config.low_ticks(c))
    logging.info('Counters after disable: %s', list(result.final_counters))


def run():
    app.run(main)


if __name__ == '__main__':
    run()
