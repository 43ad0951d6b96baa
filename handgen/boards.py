"""The board collection of a session and its lifecycle.

Boards are numbered 1..N by position, and renumbered on every structural
change. Under the rotating policy a board's vulnerability always follows its
number; under the fixed policy it is stored per board and may be overridden.
"""
import dataclasses
import logging
import typing as T

from handgen import cards
from handgen import table


POLICY_ROTATING = 'rotating'
POLICY_FIXED = 'fixed'
POLICIES = [POLICY_ROTATING, POLICY_FIXED]

lgr = logging


@dataclasses.dataclass
class Board:
    deal: cards.Deal
    number: int
    vulnerability: str = table.VUL_NONE

    @property
    def dealer(self) -> str:
        return table.dealer_of(self.number)


def _check_vulnerability(value):
    if value not in table.VULNERABILITIES:
        raise ValueError(f"Unknown vulnerability: {value}")


class BoardCollection:
    policy: str
    default_vulnerability: str
    boards: T.List[Board]

    def __init__(self, policy=POLICY_ROTATING, default_vulnerability=table.VUL_NONE):
        if policy not in POLICIES:
            raise ValueError(f"Unknown vulnerability policy: {policy}")
        _check_vulnerability(default_vulnerability)

        self.policy = policy
        self.default_vulnerability = default_vulnerability
        self.boards = []

    def __len__(self):
        return len(self.boards)

    def __iter__(self):
        return iter(self.boards)

    def __getitem__(self, index) -> Board:
        return self.boards[index]

    def vulnerability_for(self, number: int) -> str:
        """Vulnerability a new board numbered `number` starts with."""
        if self.policy == POLICY_ROTATING:
            return table.vulnerability_of(number)
        return self.default_vulnerability

    def append(self, deals: T.Iterable[cards.Deal]) -> T.List[Board]:
        start = len(self.boards) + 1
        new_boards = [Board(deal, number, self.vulnerability_for(number))
                      for number, deal in enumerate(deals, start=start)]
        self.boards.extend(new_boards)
        lgr.info("Added boards %s-%s", start, len(self.boards))
        return new_boards

    def replace(self, deals: T.Iterable[cards.Deal]) -> T.List[Board]:
        self.boards = []
        return self.append(deals)

    def clear(self):
        lgr.info("Cleared %s boards", len(self.boards))
        self.boards = []

    def delete(self, index: int) -> Board:
        self._check_index(index)
        removed = self.boards.pop(index)
        self._renumber()
        lgr.info("Deleted board %s, %s left", index + 1, len(self.boards))
        return removed

    def move(self, source: int, target: int):
        """Move the board at `source` to position `target`, keeping the others in order."""
        self._check_index(source)
        self._check_index(target)
        if source == target:
            return

        board = self.boards.pop(source)
        self.boards.insert(target, board)
        self._renumber()
        lgr.debug("Moved board %s to %s", source + 1, target + 1)

    def set_vulnerability(self, index: int, value: str):
        if self.policy != POLICY_FIXED:
            raise ValueError("Vulnerability can only be set per board under the fixed policy")
        self._check_index(index)
        _check_vulnerability(value)
        self.boards[index].vulnerability = value

    def set_default_vulnerability(self, value: str):
        _check_vulnerability(value)
        self.default_vulnerability = value

    def set_policy(self, policy: str):
        """Switch policy. Going rotating recomputes every board; going fixed keeps current values."""
        if policy not in POLICIES:
            raise ValueError(f"Unknown vulnerability policy: {policy}")
        self.policy = policy
        if policy == POLICY_ROTATING:
            self._renumber()

    def _renumber(self):
        for number, board in enumerate(self.boards, start=1):
            board.number = number
            if self.policy == POLICY_ROTATING:
                board.vulnerability = table.vulnerability_of(number)

    def _check_index(self, index):
        if not 0 <= index < len(self.boards):
            raise IndexError(f"No board at position {index} (have {len(self.boards)})")
