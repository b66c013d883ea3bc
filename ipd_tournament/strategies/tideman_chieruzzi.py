from ..engine import C, D
from .base import BaseStrategy
class TidemanChieruzzi(BaseStrategy):
    """
    Tit for tat that lengthens its punishment when the opponent betrays
    several times in a row.
    """
    def reset(self):
        super().reset()
        self.consec_betrayals = 0
        self.punishment_counter = 0
    def decide(self, my_history, opp_history):
        if not opp_history:
            return C
        if opp_history[-1] == D:
            self.consec_betrayals += 1
            if self.consec_betrayals >= 2:
                self.punishment_counter = self.consec_betrayals - 1
            return D
        self.consec_betrayals = 0
        if self.punishment_counter > 0:
            self.punishment_counter -= 1
            return D
        return C
