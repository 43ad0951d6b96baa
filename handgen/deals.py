"""Random deal sources.

A dealer hands out uniformly random legal deals, rejecting those its filter
refuses, and gives up once one deal takes more than `max_attempts` tries.
"""
import abc
import logging
import os
import typing as T

import numpy as np

from handgen import cards
from handgen import filters


SEED = os.getenv('HANDGEN_SEED')

lgr = logging


class GenerationError(Exception):
    """Deals could not be generated."""


class BudgetExhaustedError(GenerationError):
    def __init__(self, max_attempts, found=0, wanted=1):
        self.max_attempts = max_attempts
        self.found = found
        self.wanted = wanted
        super().__init__(
            f"Failed to generate a deal within {max_attempts} attempts "
            f"({found} of {wanted} found)")


class IDealer(abc.ABC):

    @abc.abstractmethod
    def deal_one(self) -> cards.Deal:
        """Deal one uniformly random deal."""
        pass

    def deal(self, num: int, accept: filters.Predicate = filters.ACCEPT_ALL,
             max_attempts: int = 5000) -> T.List[cards.Deal]:
        """Return `num` deals accepted by `accept`, or raise BudgetExhaustedError."""
        if num < 1:
            raise ValueError(f"Need at least one deal, got {num}")
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")

        if filters.is_noop(accept):
            return [self.deal_one() for _ in range(num)]

        deals = []
        total_attempts = 0
        while len(deals) < num:
            for attempt in range(1, max_attempts + 1):
                candidate = self.deal_one()
                if accept(candidate):
                    deals.append(candidate)
                    total_attempts += attempt
                    break
            else:
                lgr.info("Gave up after %s attempts with %s/%s deals",
                         max_attempts, len(deals), num)
                raise BudgetExhaustedError(max_attempts, found=len(deals), wanted=num)

        lgr.debug("Dealt %s deals in %s attempts", num, total_attempts)
        return deals


class NumpyDealer(IDealer):
    """Deals by shuffling deck indices with a numpy Generator."""

    def __init__(self, seed=SEED):
        if isinstance(seed, str):
            seed = int(seed)
        self.rng = np.random.default_rng(seed)

    def deal_one(self) -> cards.Deal:
        shuffled = self.rng.permutation(cards.DECK_SIZE)
        return cards.Deal.from_indices(shuffled.reshape(len(cards.SEATS), cards.HAND_SIZE))


class ScriptedDealer(IDealer):
    """Replays given deals in order, cycling. Handy for tests and demos."""

    def __init__(self, deals: T.Sequence[cards.Deal]):
        if not deals:
            raise ValueError("ScriptedDealer needs at least one deal")
        self._deals = list(deals)
        self._next = 0

    def deal_one(self) -> cards.Deal:
        deal = self._deals[self._next % len(self._deals)]
        self._next += 1
        return deal


def get_dealer(seed=SEED) -> IDealer:
    return NumpyDealer(seed)
