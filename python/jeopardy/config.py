"""Game configuration: defaults, environment overrides, validation."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from jeopardy.backend.engine.boardbuilder import DEFAULT_POOL_SIZE, BoardBuilder
from jeopardy.backend.engine.datasource import DEFAULT_BASE_URL, JServiceClient
from jeopardy.backend.errors import ConfigError

ENV_PREFIX = "JEOPARDY_"


@dataclass(frozen=True)
class GameConfig:
    category_count: int = 6
    clue_count: int = 5
    pool_size: int = DEFAULT_POOL_SIZE
    api_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GameConfig:
        """Build a config from ``JEOPARDY_*`` variables over the defaults.

        Recognised: ``JEOPARDY_CATEGORIES``, ``JEOPARDY_CLUES``,
        ``JEOPARDY_POOL_SIZE``, ``JEOPARDY_API_URL``, ``JEOPARDY_TIMEOUT``,
        ``JEOPARDY_SEED``.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def read(name: str, convert: Callable[[str], object], default: object) -> object:
            raw = env.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return convert(raw.strip())
            except ValueError as exc:
                raise ConfigError(f"{ENV_PREFIX}{name}={raw!r} is not valid.") from exc

        return cls(
            category_count=read("CATEGORIES", int, defaults.category_count),
            clue_count=read("CLUES", int, defaults.clue_count),
            pool_size=read("POOL_SIZE", int, defaults.pool_size),
            api_url=read("API_URL", str, defaults.api_url),
            timeout=read("TIMEOUT", float, defaults.timeout),
            seed=read("SEED", int, defaults.seed),
        )

    def validate(self) -> GameConfig:
        if self.category_count < 1:
            raise ConfigError("category_count must be at least 1.")
        if self.clue_count < 1:
            raise ConfigError("clue_count must be at least 1.")
        if self.category_count > self.pool_size:
            raise ConfigError(
                f"category_count ({self.category_count}) cannot exceed "
                f"pool_size ({self.pool_size})."
            )
        if self.timeout <= 0:
            raise ConfigError("timeout must be positive.")
        return self

    def make_builder(self) -> BoardBuilder:
        """Return a board builder talking to the configured API."""
        return BoardBuilder(
            JServiceClient(self.api_url, timeout=self.timeout),
            rng=random.Random(self.seed),
            pool_size=self.pool_size,
        )
