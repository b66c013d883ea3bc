from ..engine import C, D
from .base import BaseStrategy
class Davis(BaseStrategy):
    """Cooperates for ten moves, then betrays forever if the opponent ever betrayed."""
    def reset(self):
        super().reset()
        self.opponent_betrayed = False
    def decide(self, my_history, opp_history):
        if len(opp_history) <= 10:
            return C
        if not self.opponent_betrayed:
            self.opponent_betrayed = D in opp_history
        return D if self.opponent_betrayed else C
