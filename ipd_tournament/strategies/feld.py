from ..engine import C, D
from .base import BaseStrategy
class Feld(BaseStrategy):
    """
    Tit for tat whose willingness to answer cooperation with cooperation
    drifts toward one half as a cooperative streak grows.
    """
    def reset(self):
        super().reset()
        self.consec_coop = 0
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        if opp_history[-1] == D:
            self.consec_coop = 0
            return D
        self.consec_coop += 1
        k = self.consec_coop
        return self._cooperate_with(k / (10 + 2 * k))
