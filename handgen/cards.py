"""Cards, hands and deals, plus the hand scorer (HCP, suit lengths)."""
import dataclasses
import typing as T

import numpy as np


SEAT_N, SEAT_E, SEAT_S, SEAT_W = 'N', 'E', 'S', 'W'
SEATS = [SEAT_N, SEAT_E, SEAT_S, SEAT_W]  # clockwise
SEAT_NAMES = {
    SEAT_N: 'North',
    SEAT_E: 'East',
    SEAT_S: 'South',
    SEAT_W: 'West',
}
PARTNER_MAP = {
    SEAT_N: SEAT_S,
    SEAT_S: SEAT_N,
    SEAT_E: SEAT_W,
    SEAT_W: SEAT_E,
}

SUIT_S, SUIT_H, SUIT_D, SUIT_C = 'S', 'H', 'D', 'C'
SUITS = [SUIT_S, SUIT_H, SUIT_D, SUIT_C]
RANKS = ['A', 'K', 'Q', 'J', 'T', '9', '8', '7', '6', '5', '4', '3', '2']

HAND_SIZE = 13
DECK_SIZE = 52

HCP_BY_RANK = {'A': 4, 'K': 3, 'Q': 2, 'J': 1}
MAX_HCP = 37  # AKQJ AKQJ AKQJ A


@dataclasses.dataclass(frozen=True)
class Card:
    suit: str
    rank: str

    def __str__(self):
        return f"{self.suit}{self.rank}"


Hand = T.Tuple[Card, ...]

# deck index i -> card; suit-major, ranks high to low, so sorting indices sorts a hand
DECK = tuple(Card(suit, rank) for suit in SUITS for rank in RANKS)


@dataclasses.dataclass(frozen=True)
class Deal:
    """Four 13-card hands partitioning the deck."""
    hands: T.Mapping[str, Hand]

    def __getitem__(self, seat) -> Hand:
        return self.hands[seat]

    @classmethod
    def from_indices(cls, indices: np.ndarray) -> 'Deal':
        """Build from a (4, 13) array of deck indices, rows in `SEATS` order."""
        indices = np.asarray(indices).reshape(len(SEATS), HAND_SIZE)
        hands = {
            seat: tuple(DECK[i] for i in np.sort(row))
            for seat, row in zip(SEATS, indices)
        }
        return cls(hands)

    @classmethod
    def from_strings(cls, **hands: str) -> 'Deal':
        """Build from hand strings like `N='SAKQHJT9D876C5432'` (suit letter then ranks)."""
        return cls({seat: parse_hand(hands[seat]) for seat in SEATS})

    def validate(self):
        """Raise ValueError unless the hands partition the 52-card deck."""
        if set(self.hands) != set(SEATS):
            raise ValueError(f"Deal must have hands for {SEATS}, got {sorted(self.hands)}")
        for seat, hand in self.hands.items():
            if len(hand) != HAND_SIZE:
                raise ValueError(f"{SEAT_NAMES[seat]} has {len(hand)} cards, expected {HAND_SIZE}")

        all_cards = [card for hand in self.hands.values() for card in hand]
        if len(set(all_cards)) != DECK_SIZE:
            raise ValueError("Deal has duplicate cards")


def parse_hand(text: str) -> Hand:
    """Parse 'SAKQHJT9D876C5432'-like text. Suits may appear in any order."""
    cards = []
    suit = None
    for char in text.upper():
        if char in SUITS:
            suit = char
        elif char in RANKS and suit is not None:
            cards.append(Card(suit, char))
        else:
            raise ValueError(f"Unexpected '{char}' in hand: {text}")
    return tuple(cards)


def partner(seat: str) -> str:
    return PARTNER_MAP[seat]


def hcp(hand: Hand) -> int:
    """High-card points: A=4, K=3, Q=2, J=1."""
    return sum(HCP_BY_RANK.get(card.rank, 0) for card in hand)


def count_suit(hand: Hand, suit: str) -> int:
    return sum(1 for card in hand if card.suit == suit)