"""Standard duplicate board table: dealer and vulnerability by board number.

Dealer rotates N, E, S, W from board 1. Vulnerability follows the 16-board
cycle, i.e. each group of four boards shifts the none/ns/ew/both sequence by one:

    1 none   2 ns     3 ew     4 both
    5 ns     6 ew     7 both   8 none
    9 ew    10 both  11 none  12 ns
   13 both  14 none  15 ns    16 ew
"""
from handgen import cards


VUL_NONE, VUL_NS, VUL_EW, VUL_BOTH = 'none', 'ns', 'ew', 'both'
VULNERABILITIES = [VUL_NONE, VUL_NS, VUL_EW, VUL_BOTH]
VUL_NAMES = {
    VUL_NONE: 'None',
    VUL_NS: 'N-S',
    VUL_EW: 'E-W',
    VUL_BOTH: 'Both',
}


def _check_number(board_number):
    if board_number < 1:
        raise ValueError(f"Board numbers start at 1, got {board_number}")


def dealer_of(board_number: int) -> str:
    _check_number(board_number)
    return cards.SEATS[(board_number - 1) % 4]


def vulnerability_of(board_number: int) -> str:
    _check_number(board_number)
    idx = board_number - 1
    return VULNERABILITIES[(idx + idx // 4) % 4]
