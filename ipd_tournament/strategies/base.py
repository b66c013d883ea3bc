from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..engine import Action


class BaseStrategy(ABC):
    """
    Base class for strategies. Implement decide and optionally reset.
    decide receives read-only histories of equal length and returns an Action.
    """
    display_name: Optional[str] = None

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.reset()

    @classmethod
    def label(cls) -> str:
        return cls.display_name or cls.__name__

    def name(self) -> str:
        return self.label()

    def reset(self):
        # Reset any internal state between matches
        pass

    def _chance(self, p: float) -> bool:
        """Bernoulli draw from this instance's own generator."""
        return self.rng.random() < p

    def _cooperate_with(self, p: float) -> Action:
        return Action.COOPERATE if self._chance(p) else Action.BETRAY

    @abstractmethod
    def decide(self, my_history: Sequence[Action], opp_history: Sequence[Action]) -> Action:
        ...

    def __repr__(self):
        return f"{self.name()}"
