"""Synchronization of asynchronous level inputs."""

from amaranth import *
from amaranth.build import *


class Synchronizer(Elaboratable):
    """Flip-flop chain synchronizer.

    The input is sampled on every clock edge and shifted through a chain of
    stages flip-flops. The output is the sample taken stages cycles ago; with
    the default two stages, a change on the input is visible on the output
    exactly two cycles later. There is no filtering: this is a fixed delay,
    not a debouncer.

    The chain has no reset, so it free-runs even while the rest of the design
    is held in reset.
    """

    def __init__(self, input: Signal, stages: int = 2):
        super().__init__()
        assert len(input) == 1
        assert stages >= 1
        self.input = input
        self.stages = stages
        self.output = Signal()

    def elaborate(self, _: Platform) -> Module:
        m = Module()
        chain = Signal(self.stages, reset_less=True)
        m.d.sync += chain.eq(Cat(self.input, chain[:-1]))
        m.d.comb += self.output.eq(chain[-1])
        return m
