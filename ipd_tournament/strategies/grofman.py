from ..engine import C
from .base import BaseStrategy

COOPERATE_ON_MISMATCH = 2 / 7


class Grofman(BaseStrategy):
    """Cooperates after matching moves, otherwise cooperates with probability 2/7."""
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        if my_history[-1] == opp_history[-1]:
            return C
        return self._cooperate_with(COOPERATE_ON_MISMATCH)
