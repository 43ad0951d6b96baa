"""Generate constrained deals, one batch or one board at a time."""
import logging
import math
import typing as T

from handgen import boards
from handgen import budget
from handgen import cards
from handgen import constraints as cs
from handgen import deals
from handgen import filters
from handgen import table
from handgen import util


MIN_BOARDS = 1
MAX_BOARDS = 32
DEFAULT_NUM_BOARDS = 1

lgr = logging


def clamp_board_count(raw, default=DEFAULT_NUM_BOARDS) -> int:
    """Coerce user input into [MIN_BOARDS, MAX_BOARDS]; unparsable input gives `default`."""
    num = util.parse_int(raw)
    if num is None:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            value = math.nan
        if math.isnan(value):
            lgr.debug("Unparsable board count %r, using %s", raw, default)
            num = default
        elif math.isinf(value):  # too many digits for an int, or e.g. '1e400'
            num = MAX_BOARDS if value > 0 else MIN_BOARDS
        else:
            num = round(value)
    return max(MIN_BOARDS, min(MAX_BOARDS, num))


def generate_deals(num_boards: int,
                   hcp: cs.ConstraintSet = None,
                   dist: cs.ConstraintSet = None,
                   first_number: int = 1,
                   dealer: deals.IDealer = None,
                   policy: budget.BudgetPolicy = budget.DEFAULT_POLICY) -> T.List[cards.Deal]:
    """Deal `num_boards` deals for boards `first_number`, `first_number + 1`, ...

    Seat-absolute constraints share one filter and one dealer call. Dealer-relative
    constraints are recompiled for each board, since each board has its own dealer.
    Raises GenerationError; nothing is returned on failure.
    """
    hcp = hcp or cs.no_constraints(cs.MEASURE_HCP)
    dist = dist or cs.no_constraints(cs.MEASURE_DIST)
    dealer = dealer or deals.get_dealer()
    num_boards = clamp_board_count(num_boards)

    max_attempts = budget.estimate_for(hcp, dist, policy)
    lgr.info("Generating %s boards from board %s with up to %s attempts each; %s; %s",
             num_boards, first_number, max_attempts, hcp.describe(), dist.describe())

    if not (hcp.is_relative or dist.is_relative):
        accept = filters.compile_filters(hcp, dist)
        return dealer.deal(num_boards, accept, max_attempts)

    generated = []
    for board_number in range(first_number, first_number + num_boards):
        context = filters.BoardContext(dealer=table.dealer_of(board_number))
        accept = filters.compile_filters(hcp, dist, context)
        [one_deal] = dealer.deal(1, accept, max_attempts)
        generated.append(one_deal)
    return generated


def generate_boards(num_boards: int,
                    hcp: cs.ConstraintSet = None,
                    dist: cs.ConstraintSet = None,
                    collection: boards.BoardCollection = None,
                    replace: bool = False,
                    dealer: deals.IDealer = None,
                    policy: budget.BudgetPolicy = budget.DEFAULT_POLICY) -> T.List[boards.Board]:
    """Generate into `collection` (append, or replace when `replace`), returning the new boards.

    The collection is only touched once every deal has been found.
    """
    collection = collection if collection is not None else boards.BoardCollection()
    first_number = 1 if replace else len(collection) + 1

    new_deals = generate_deals(num_boards, hcp, dist,
                               first_number=first_number, dealer=dealer, policy=policy)

    if replace:
        return collection.replace(new_deals)
    return collection.append(new_deals)
