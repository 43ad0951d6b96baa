"""Range constraints as entered by the user, normalized into constraint sets.

User text is forgiving: a bound that is blank, non-numeric, negative or above
the measure's ceiling is dropped as if it were never entered. A max below
the min is dropped the same way.
"""
import dataclasses
import logging
import typing as T

from handgen import cards
from handgen import util


MEASURE_HCP = 'hcp'
MEASURE_DIST = 'dist'
CEILINGS = {
    MEASURE_HCP: cards.MAX_HCP,
    MEASURE_DIST: cards.HAND_SIZE,
}

MODE_NONE = 'none'
MODE_PER_SEAT = 'per_seat'
MODE_RELATIVE = 'relative_to_dealer'
MODES = [MODE_NONE, MODE_PER_SEAT, MODE_RELATIVE]

ROLE_DEALER = 'dealer'
ROLE_PARTNER = 'partner'
ROLES = [ROLE_DEALER, ROLE_PARTNER]

lgr = logging

RawBound = T.Union[str, int, None]
RawRange = T.Union[T.Tuple[RawBound, RawBound], 'Range', None]
CellKey = T.Tuple[str, T.Optional[str]]  # (seat or role, suit); suit is None for HCP


@dataclasses.dataclass(frozen=True)
class Range:
    min: T.Optional[int] = None
    max: T.Optional[int] = None

    @classmethod
    def parse(cls, raw_min: RawBound, raw_max: RawBound, ceiling: int) -> 'Range':
        lo = _parse_bound(raw_min, ceiling)
        hi = _parse_bound(raw_max, ceiling)
        if lo is not None and hi is not None and lo > hi:
            lgr.debug("Ignoring max %s, below min %s", hi, lo)
            hi = None
        return cls(min=lo, max=hi)

    @property
    def is_active(self) -> bool:
        return self.min is not None or self.max is not None

    def contains(self, value: int) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    def __str__(self):
        lo = '' if self.min is None else self.min
        hi = '' if self.max is None else self.max
        return f"{lo}-{hi}"


def _parse_bound(raw: RawBound, ceiling: int) -> T.Optional[int]:
    if raw is None or raw == '':
        return None
    value = util.parse_int(raw)
    if value is None or not 0 <= value <= ceiling:
        # TODO surface dropped bounds to the user instead of only logging them
        lgr.debug("Ignoring bound %r, not an integer in [0, %s]", raw, ceiling)
        return None
    return value


def _to_range(raw: RawRange, ceiling: int) -> Range:
    if raw is None:
        return Range()
    if isinstance(raw, Range):
        return Range.parse(raw.min, raw.max, ceiling)
    raw_min, raw_max = raw
    return Range.parse(raw_min, raw_max, ceiling)


@dataclasses.dataclass(frozen=True)
class ConstraintSet:
    """Active ranges of one measure (HCP or suit length) under one mode.

    Cells are keyed by (seat, suit) for `per_seat` and (role, suit) for
    `relative_to_dealer`; suit is None for HCP. Inactive ranges are never stored.
    """
    measure: str
    mode: str = MODE_NONE
    cells: T.Mapping[CellKey, Range] = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        if self.measure not in CEILINGS:
            raise ValueError(f"Unknown measure: {self.measure}")
        if self.mode not in MODES:
            raise ValueError(f"Unknown constraint mode: {self.mode}")

    @property
    def is_active(self) -> bool:
        return self.mode != MODE_NONE and bool(self.cells)

    @property
    def is_relative(self) -> bool:
        return self.mode == MODE_RELATIVE

    @property
    def has_zero_suit(self) -> bool:
        """Whether any suit is capped at zero cards, i.e. a void is required."""
        return (self.measure == MEASURE_DIST
                and any(r.max == 0 for r in self.cells.values()))

    def describe(self) -> str:
        if not self.is_active:
            return f"{self.measure}: none"
        cells = ', '.join(f"{who}{suit or ''} {rng}" for (who, suit), rng in self.cells.items())
        return f"{self.measure} {self.mode}: {cells}"


def cell_keys(measure, mode) -> T.List[CellKey]:
    """All cells a constraint set of this measure and mode can hold, in display order."""
    if mode == MODE_NONE:
        return []
    owners = cards.SEATS if mode == MODE_PER_SEAT else ROLES
    suits = [None] if measure == MEASURE_HCP else cards.SUITS
    return [(who, suit) for who in owners for suit in suits]


def build(measure, mode, raw_cells: T.Mapping[CellKey, RawRange]) -> ConstraintSet:
    """Normalize raw (min, max) input per cell, keeping only the active ranges."""
    if mode == MODE_NONE:
        return no_constraints(measure)

    valid_keys = cell_keys(measure, mode)
    unknown = set(raw_cells) - set(valid_keys)
    if unknown:
        raise ValueError(f"Unknown cells for {measure} {mode}: {sorted(unknown, key=str)}")

    cells = {}
    for key in valid_keys:
        rng = _to_range(raw_cells.get(key), CEILINGS[measure])
        if rng.is_active:
            cells[key] = rng
    return ConstraintSet(measure, mode, cells)


def no_constraints(measure) -> ConstraintSet:
    return ConstraintSet(measure)


def per_seat_hcp(ranges: T.Mapping[str, RawRange]) -> ConstraintSet:
    """`ranges`: seat -> (min, max), e.g. {'N': ('12', '14')}."""
    return build(MEASURE_HCP, MODE_PER_SEAT,
                 {(seat, None): rng for seat, rng in ranges.items()})


def per_seat_dist(ranges: T.Mapping[str, T.Mapping[str, RawRange]]) -> ConstraintSet:
    """`ranges`: seat -> suit -> (min, max), e.g. {'S': {'H': (5, None)}}."""
    return build(MEASURE_DIST, MODE_PER_SEAT,
                 {(seat, suit): rng
                  for seat, suit_ranges in ranges.items()
                  for suit, rng in suit_ranges.items()})


def relative_hcp(dealer: RawRange = None, partner: RawRange = None) -> ConstraintSet:
    return build(MEASURE_HCP, MODE_RELATIVE,
                 {(ROLE_DEALER, None): dealer, (ROLE_PARTNER, None): partner})


def relative_dist(dealer: T.Mapping[str, RawRange] = None,
                  partner: T.Mapping[str, RawRange] = None) -> ConstraintSet:
    """Suit-length ranges for the dealer's and the partner's hands: suit -> (min, max)."""
    raw_cells = {}
    for role, suit_ranges in zip(ROLES, (dealer, partner)):
        for suit, rng in (suit_ranges or {}).items():
            raw_cells[(role, suit)] = rng
    return build(MEASURE_DIST, MODE_RELATIVE, raw_cells)
