"""Run configuration: defaults, environment overrides and validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

DEFAULT_ROUNDS = 400
DEFAULT_MATCHES = 100


class ConfigError(ValueError):
    """Raised for an unusable run configuration."""


def _env_int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    value = env.get(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc


@dataclass
class TournamentConfig:
    rounds_per_match: int = DEFAULT_ROUNDS
    matches_per_pair: int = DEFAULT_MATCHES
    seed: Optional[int] = None
    workers: int = 1
    out_dir: str = "."
    only: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TournamentConfig":
        """Build a config from ``IPD_*`` variables and ``OUT_DIR``."""

        env = os.environ if env is None else env
        return cls(
            rounds_per_match=_env_int(env, "IPD_ROUNDS", DEFAULT_ROUNDS),
            matches_per_pair=_env_int(env, "IPD_MATCHES", DEFAULT_MATCHES),
            seed=_env_int(env, "IPD_SEED", None),
            workers=_env_int(env, "IPD_WORKERS", 1),
            out_dir=env.get("OUT_DIR", "") or ".",
        )

    def validate(self) -> "TournamentConfig":
        if self.rounds_per_match < 1:
            raise ConfigError(f"rounds_per_match must be positive, got {self.rounds_per_match}")
        if self.matches_per_pair < 1:
            raise ConfigError(f"matches_per_pair must be positive, got {self.matches_per_pair}")
        if self.workers < 1:
            raise ConfigError(f"workers must be positive, got {self.workers}")
        return self
