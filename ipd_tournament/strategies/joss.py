from ..engine import C, D
from .base import BaseStrategy

COOPERATE_AFTER_COOPERATION = 0.9


class Joss(BaseStrategy):
    """Tit for tat that sneaks in a betrayal 10% of the time."""
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        if opp_history[-1] == D:
            return D
        return self._cooperate_with(COOPERATE_AFTER_COOPERATION)
