from ..engine import C
from .base import BaseStrategy

OPENING = 11
SAMPLE = 10


class Tullock(BaseStrategy):
    """
    Cooperates for eleven moves, then cooperates 10% less often than the
    opponent did over its first ten moves.
    """
    def reset(self):
        super().reset()
        self.initial_phase = True
        self.coop_prob = 1.0
    def decide(self, my_history, opp_history):
        if len(opp_history) <= OPENING:
            return C
        if self.initial_phase:
            rate = opp_history[:SAMPLE].count(C) / SAMPLE
            self.coop_prob = max(0.0, rate * 0.9)
            self.initial_phase = False
        return self._cooperate_with(self.coop_prob)
