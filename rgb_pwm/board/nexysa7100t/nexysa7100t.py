"""Amaranth support for https://store.digilentinc.com/nexys-a7-fpga-trainer-board-recommended-for-ece-curriculum/."""

from amaranth_boards import nexys4ddr


class NexysA7100TPlatform(nexys4ddr.Nexys4DDRPlatform):
    """Platform for the Digilent Nexys A7-100T.

    This board is functionally identical to the discontinued Nexys 4 DDR. Its
    default clock is 100 MHz, and rgb_led 0 and 1 are the two tri-color LEDs
    (LD16 and LD17).
    """
