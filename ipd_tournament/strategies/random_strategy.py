from .base import BaseStrategy
class RandomStrategy(BaseStrategy):
    display_name = "Random"
    def decide(self, my_history, opp_history):
        return self._cooperate_with(0.5)
