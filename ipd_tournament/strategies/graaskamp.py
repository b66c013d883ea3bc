from collections import deque
from typing import Deque

from ..engine import Action, C, D
from .base import BaseStrategy

PROBE_ROUND = 51
DETECT_FROM = 57
WINDOW = 10


class Graaskamp(BaseStrategy):
    """
    Tit for tat for 50 moves, a single probing betrayal on move 51, five more
    moves of tit for tat, and from then on a watch for random-looking
    opponents. Once an opponent looks random it is betrayed for the rest of
    the match.
    """
    def reset(self):
        super().reset()
        self.random_detected = False
        self.window: Deque[Action] = deque(maxlen=WINDOW)

    def decide(self, my_history, opp_history):
        t = len(opp_history)
        if t <= 50:
            return opp_history[-1] if opp_history else C
        if t == PROBE_ROUND:
            return D
        if t < DETECT_FROM:
            return opp_history[-1]
        if not self.random_detected:
            if len(self.window) == WINDOW:
                coop_fraction = self.window.count(C) / WINDOW
                self.random_detected = abs(coop_fraction - 0.5) < 0.1
            self.window.append(opp_history[-1])
        if self.random_detected:
            return D
        return opp_history[-1]
