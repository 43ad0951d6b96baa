"""
see: BBO LIN files (e.g. as downloaded from BBO "My hands")

One line per board:

    qx|o<n>|md|<dealer><south>,<west>,<north>|rh||ah|Board <n>|sv|<vul>|pg||

- <dealer> is 1=South, 2=West, 3=North, 4=East.
  Board numbers follow the standard duplicate table, so board 1 is dealt by
  North and encodes as 3; board 3 (South) is the first to encode as 1.
- Hands are given as S, W, N; East is implied by the remaining 13 cards.
- Each hand is "S<ranks>H<ranks>D<ranks>C<ranks>", ranks in the order held.
- <vul> is 0=none, n=N-S, e=E-W, b=both.
"""
import logging as log
import pathlib
import typing as T

from handgen import cards
from handgen import table


DEALER_CODES = {
    cards.SEAT_S: '1',
    cards.SEAT_W: '2',
    cards.SEAT_N: '3',
    cards.SEAT_E: '4',
}
VUL_CODES = {
    table.VUL_NONE: '0',
    table.VUL_NS: 'n',
    table.VUL_EW: 'e',
    table.VUL_BOTH: 'b',
}
HAND_ORDER = [cards.SEAT_S, cards.SEAT_W, cards.SEAT_N]

LIN_SUFFIX = '.lin'


def encode_hand(hand: cards.Hand) -> str:
    """E.g. 'SQ9HAKT2DAT3CJT53'; a void is the bare suit letter."""
    by_suit = {suit: [] for suit in cards.SUITS}
    for card in hand:
        by_suit[card.suit].append(card.rank)
    return ''.join(suit + ''.join(by_suit[suit]) for suit in cards.SUITS)


def encode_board(deal: cards.Deal, number: int, dealer: str, vulnerability: str) -> str:
    dealer_code = DEALER_CODES.get(dealer, '1')
    hands = ','.join(encode_hand(deal[seat]) for seat in HAND_ORDER)
    vul_code = VUL_CODES.get(vulnerability, '0')
    return (f"qx|o{number}|md|{dealer_code}{hands}|rh||"
            f"ah|Board {number}|sv|{vul_code}|pg||")


def encode_boards(boards) -> str:
    """Encode boards as numbered by position (1, 2, ...), whatever their stored numbers."""
    lines = [encode_board(board.deal, number, table.dealer_of(number), board.vulnerability)
             for number, board in enumerate(boards, start=1)]
    return '\n'.join(lines)


def encode_deals(deals: T.Iterable[cards.Deal], start: int = 1,
                 vulnerability_of: T.Callable[[int], str] = lambda number: table.VUL_NONE) -> str:
    """Encode bare deals numbered from `start`."""
    lines = [encode_board(deal, number, table.dealer_of(number), vulnerability_of(number))
             for number, deal in enumerate(deals, start=start)]
    return '\n'.join(lines)


def write_lin(content: str, path, force=False) -> pathlib.Path:
    path = pathlib.Path(path)
    if path.suffix.lower() != LIN_SUFFIX:
        log.warning("Writing LIN to %s without a %s suffix", path, LIN_SUFFIX)
    if path.exists():
        if force:
            log.warning("Overwriting existing file at %s", path)
        else:
            raise IOError("File exists; use force=True to overwrite.")

    with open(path, 'w', newline='') as fo:
        fo.write(content)
    log.info("Wrote %s boards to %s", content.count('\n') + 1 if content else 0, path)
    return path
