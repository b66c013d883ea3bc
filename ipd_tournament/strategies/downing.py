from ..engine import C, D
from .base import BaseStrategy
class Downing(BaseStrategy):
    """
    Estimates the opponent's cooperation probability from everything seen so
    far and picks the move with the higher expected payoff.
    """
    def reset(self):
        super().reset()
        self.opp_coop = 0
        self.opp_total = 0
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        self.opp_total += 1
        if opp_history[-1] == C:
            self.opp_coop += 1
        p = self.opp_coop / self.opp_total
        betray_value = 5 * p + 1 * (1 - p)
        cooperate_value = 3 * p + 0 * (1 - p)
        return D if betray_value > cooperate_value else C
