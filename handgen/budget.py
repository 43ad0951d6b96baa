"""Attempt ceilings for rejection sampling.

A coarse table keyed on which constraint classes are active. Intersecting HCP
and distribution constraints make acceptable deals much rarer, and requiring a
void rarer still.
"""
import dataclasses

from handgen import constraints as cs


@dataclasses.dataclass(frozen=True)
class BudgetPolicy:
    base: int = 5000  # nothing, or a single constraint class
    combined: int = 15000  # HCP and distribution together
    combined_zero_suit: int = 80000  # ... with some suit capped at 0 cards

    def __post_init__(self):
        for name, value in dataclasses.asdict(self).items():
            if value < 1:
                raise ValueError(f"Budget '{name}' must be positive, got {value}")


DEFAULT_POLICY = BudgetPolicy()


def estimate(has_hcp: bool, has_dist: bool, has_zero_suit: bool,
             policy: BudgetPolicy = DEFAULT_POLICY) -> int:
    if not (has_hcp and has_dist):
        return policy.base
    if has_zero_suit:
        return policy.combined_zero_suit
    return policy.combined


def estimate_for(hcp: cs.ConstraintSet, dist: cs.ConstraintSet,
                 policy: BudgetPolicy = DEFAULT_POLICY) -> int:
    return estimate(hcp.is_active, dist.is_active, dist.has_zero_suit, policy)
