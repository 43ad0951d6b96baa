"""Session state shared by the CLI and the app: constraints, boards, in-flight flag, last error."""
import dataclasses
import logging
import typing as T

from handgen import boards
from handgen import budget
from handgen import constraints as cs
from handgen import deals
from handgen import generate
from handgen import lin


BUDGET_EXHAUSTED_MSG = (
    'No deal satisfied all constraints in time. Combinations like "0 spades" or '
    '"0 diamonds" are very rare. Try loosening (e.g. 1 or fewer), or generate 1 board.')
GENERIC_FAILURE_MSG = "Failed to generate hands. Try fewer or looser constraints."

lgr = logging


def describe_error(exc: Exception) -> str:
    """User-facing text for a failed generation."""
    if isinstance(exc, deals.BudgetExhaustedError):
        return BUDGET_EXHAUSTED_MSG
    return str(exc) or GENERIC_FAILURE_MSG


@dataclasses.dataclass
class DealSession:
    hcp: cs.ConstraintSet = dataclasses.field(
        default_factory=lambda: cs.no_constraints(cs.MEASURE_HCP))
    dist: cs.ConstraintSet = dataclasses.field(
        default_factory=lambda: cs.no_constraints(cs.MEASURE_DIST))
    collection: boards.BoardCollection = dataclasses.field(default_factory=boards.BoardCollection)
    dealer: deals.IDealer = dataclasses.field(default_factory=deals.get_dealer)
    budget_policy: budget.BudgetPolicy = budget.DEFAULT_POLICY

    generating: bool = False
    error: T.Optional[str] = None

    def add_boards(self, num_boards) -> T.Optional[T.List[boards.Board]]:
        """Append newly generated boards after the existing ones."""
        return self._generate(num_boards, replace=False)

    def new_boards(self, num_boards) -> T.Optional[T.List[boards.Board]]:
        """Discard the current boards and generate a fresh set numbered from 1."""
        return self._generate(num_boards, replace=True)

    def export_lin(self) -> str:
        return lin.encode_boards(self.collection)

    def save_lin(self, path, force=False):
        if not len(self.collection):
            raise ValueError("No boards to save")
        return lin.write_lin(self.export_lin(), path, force=force)

    def _generate(self, num_boards, replace) -> T.Optional[T.List[boards.Board]]:
        """Return the new boards, or None on failure with `self.error` set."""
        if self.generating:
            lgr.warning("Generation already in progress; ignoring request")
            return None

        self.error = None
        self.generating = True
        try:
            return generate.generate_boards(
                generate.clamp_board_count(num_boards), self.hcp, self.dist,
                collection=self.collection, replace=replace,
                dealer=self.dealer, policy=self.budget_policy)
        except deals.GenerationError as e:
            lgr.warning("Generation failed: %s", e)
            self.error = describe_error(e)
            return None
        except Exception as e:
            lgr.exception("Unexpected generation failure")
            self.error = describe_error(e)
            return None
        finally:
            self.generating = False
