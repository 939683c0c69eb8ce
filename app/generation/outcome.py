import random
from abc import ABC, abstractmethod

from app.generation.models import Disposition, Register

REJECTION_PROBABILITY = 0.0001
TERSE_THRESHOLD = 0.2
VERBOSE_THRESHOLD = 0.8


class BaseOutcomeSelector(ABC):
    """Contract for drawing the disposition of a request."""

    @abstractmethod
    def select(self) -> Disposition:
        """Return the disposition for one request."""


class OutcomeSelector(BaseOutcomeSelector):
    """Weighted draw: rare rejection, otherwise terse/normal/verbose at 0.2/0.6/0.2.

    The random source is injectable so a seeded instance (or a stub whose
    random() returns fixed values) makes every branch reachable in tests.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def select(self) -> Disposition:
        if self._rng.random() < REJECTION_PROBABILITY:
            return Disposition.reject()
        roll = self._rng.random()
        if roll < TERSE_THRESHOLD:
            return Disposition.approve(Register.TERSE)
        if roll < VERBOSE_THRESHOLD:
            return Disposition.approve(Register.NORMAL)
        return Disposition.approve(Register.VERBOSE)


class FixedOutcomeSelector(BaseOutcomeSelector):
    """Always returns the same disposition."""

    def __init__(self, disposition: Disposition) -> None:
        self._disposition = disposition

    def select(self) -> Disposition:
        return self._disposition
