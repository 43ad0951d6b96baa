"""Compile constraint sets into deal predicates."""
import dataclasses
import functools
import logging
import typing as T

from handgen import cards
from handgen import constraints as cs


lgr = logging

Predicate = T.Callable[[cards.Deal], bool]


@dataclasses.dataclass(frozen=True)
class BoardContext:
    """Per-board facts a dealer-relative filter binds to."""
    dealer: str

    @property
    def partner(self) -> str:
        return cards.partner(self.dealer)

    def seat_of(self, role: str) -> str:
        if role == cs.ROLE_DEALER:
            return self.dealer
        if role == cs.ROLE_PARTNER:
            return self.partner
        raise ValueError(f"Unknown role: {role}")


def ACCEPT_ALL(deal: cards.Deal) -> bool:
    """The no-op filter. Samplers skip evaluating it altogether."""
    return True


def is_noop(predicate: Predicate) -> bool:
    return predicate is ACCEPT_ALL


def measure(hand: cards.Hand, suit: T.Optional[str]) -> int:
    """HCP when `suit` is None, otherwise the length of `suit`."""
    if suit is None:
        return cards.hcp(hand)
    return cards.count_suit(hand, suit)


def resolve_seat(constraints: cs.ConstraintSet, who: str,
                 context: T.Optional[BoardContext]) -> str:
    if not constraints.is_relative:
        return who
    if context is None:
        raise ValueError("Dealer-relative constraints need a board context")
    return context.seat_of(who)


def evaluate(constraints: cs.ConstraintSet, deal: cards.Deal,
             context: T.Optional[BoardContext] = None) -> bool:
    """Check `deal` against every active cell of `constraints`."""
    if not constraints.is_active:
        return True

    for (who, suit), rng in constraints.cells.items():
        seat = resolve_seat(constraints, who, context)
        if not rng.contains(measure(deal[seat], suit)):
            return False
    return True


def compile_filter(constraints: cs.ConstraintSet,
                   context: T.Optional[BoardContext] = None) -> Predicate:
    if not constraints.is_active:
        return ACCEPT_ALL

    if constraints.is_relative and context is None:
        raise ValueError("Dealer-relative constraints need a board context")

    lgr.debug("Compiled filter: %s (context=%s)", constraints.describe(), context)
    return functools.partial(evaluate, constraints, context=context)


def compile_filters(hcp: cs.ConstraintSet, dist: cs.ConstraintSet,
                    context: T.Optional[BoardContext] = None) -> Predicate:
    """AND the HCP-class and distribution-class filters into one predicate."""
    active = [pred for pred in (compile_filter(hcp, context), compile_filter(dist, context))
              if not is_noop(pred)]
    if not active:
        return ACCEPT_ALL
    if len(active) == 1:
        return active[0]

    hcp_filter, dist_filter = active

    def _both(deal):
        return hcp_filter(deal) and dist_filter(deal)
    return _both
