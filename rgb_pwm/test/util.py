"""Constants for test and simulation."""


SIMULATION_CLOCK_FREQUENCY = 100_000_000
