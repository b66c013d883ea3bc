from ..engine import C
from .base import BaseStrategy

INITIAL_PROB = 0.3
UPDATE_EVERY = 10
MIN_PROB = 0.3
MAX_PROB = 0.7


class Anonymous(BaseStrategy):
    """
    Cooperates with a probability that starts at 30% and is re-blended with
    the opponent's recent cooperation every ten moves, kept within 30%-70%.
    """
    def reset(self):
        super().reset()
        self.coop_prob = INITIAL_PROB
    def decide(self, my_history, opp_history):
        t = len(opp_history)
        if t > 0 and t % UPDATE_EVERY == 0:
            recent = opp_history[-UPDATE_EVERY:]
            observed = recent.count(C) / UPDATE_EVERY
            blended = 0.7 * self.coop_prob + 0.3 * observed
            self.coop_prob = min(MAX_PROB, max(MIN_PROB, blended))
        return self._cooperate_with(self.coop_prob)
