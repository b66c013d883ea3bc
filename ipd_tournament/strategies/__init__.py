import random
from typing import List, Optional, Tuple, Type

from .base import BaseStrategy
from .tit_for_tat import TitForTat
from .tideman_chieruzzi import TidemanChieruzzi
from .nydegger import Nydegger
from .grofman import Grofman
from .shubik import Shubik
from .stein_rapoport import SteinRapoport
from .grudger import Grudger
from .davis import Davis
from .graaskamp import Graaskamp
from .downing import Downing
from .feld import Feld
from .joss import Joss
from .tullock import Tullock
from .anonymous import Anonymous
from .random_strategy import RandomStrategy

CATALOGUE: List[Tuple[int, Type[BaseStrategy]]] = [
    (1, TitForTat),
    (2, TidemanChieruzzi),
    (3, Nydegger),
    (4, Grofman),
    (5, Shubik),
    (6, SteinRapoport),
    (7, Grudger),
    (8, Davis),
    (9, Graaskamp),
    (10, Downing),
    (11, Feld),
    (12, Joss),
    (13, Tullock),
    (14, Anonymous),
    (15, RandomStrategy),
]

ALL_STRATEGIES = [cls for _, cls in CATALOGUE]

_BY_ID = dict(CATALOGUE)


class UnknownStrategyError(ValueError):
    """Raised for a strategy id or name outside the catalogue."""


def strategy_class(strategy_id: int) -> Type[BaseStrategy]:
    try:
        return _BY_ID[strategy_id]
    except (KeyError, TypeError):
        raise UnknownStrategyError(
            f"Invalid strategy id {strategy_id!r}; expected 1..{len(CATALOGUE)}"
        ) from None


def create_strategy(strategy_id: int, rng: Optional[random.Random] = None) -> BaseStrategy:
    """Build a fresh strategy for a catalogue id.

    When ``rng`` is given, the new instance gets its own generator seeded from
    it, so seeded runs are reproducible while instances draw independently.
    """
    cls = strategy_class(strategy_id)
    child = random.Random(rng.getrandbits(64)) if rng is not None else None
    return cls(rng=child)
