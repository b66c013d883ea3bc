from ..engine import C
from .base import BaseStrategy
class TitForTat(BaseStrategy):
    """Cooperates first, then mirrors the opponent's last move."""
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        return opp_history[-1]
