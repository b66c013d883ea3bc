from ..engine import C, D
from .base import BaseStrategy
class Shubik(BaseStrategy):
    """Retaliates after each betrayal, one round longer every time."""
    def reset(self):
        super().reset()
        self.revenge_counter = 0
        self.revenge_length = 1
    def decide(self, my_history, opp_history):
        if opp_history and opp_history[-1] == D:
            self.revenge_length += 1
            self.revenge_counter = self.revenge_length
        if self.revenge_counter > 0:
            self.revenge_counter -= 1
            return D
        return C
