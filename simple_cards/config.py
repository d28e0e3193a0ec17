"""Randomness configuration.

Lets an application pick its randomness source from settings or the
environment instead of hard-coding a generator class. Uses a Pydantic
dataclass so invalid settings are rejected when the config is built.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import Field, field_validator, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core.enums import RandomKind
from .rng import (
    CRYPTO_RANDOM,
    PREDEFINED_RANDOM,
    STANDARD_RANDOM,
    FixedRandom,
    RandomSource,
)

logger = logging.getLogger(__name__)

ENV_KIND = "SIMPLE_CARDS_RANDOM"
ENV_SEED = "SIMPLE_CARDS_SEED"


@pydantic_dataclass
class RandomConfig:
    """Which randomness source to use.

    A seed is required for the fixed source and rejected for the others,
    which choose their own seed.
    """
    kind: RandomKind = Field(RandomKind.STANDARD, description="randomness source")
    seed: Optional[int] = Field(None, description="seed for the fixed source")

    @field_validator('kind', mode='before')
    @classmethod
    def normalize_kind(cls, v):
        """Accept kind names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode='after')
    def validate_seed(self):
        """Check that the seed matches the kind."""
        if self.kind is RandomKind.FIXED and self.seed is None:
            raise ValueError("the fixed randomness source needs a seed")
        if self.kind is not RandomKind.FIXED and self.seed is not None:
            raise ValueError(f"the {self.kind.value} randomness source takes no seed")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RandomConfig':
        """Build a config from SIMPLE_CARDS_RANDOM and SIMPLE_CARDS_SEED.

        Args:
            environ: variables to read, os.environ when omitted

        Returns:
            The config; the standard source when nothing is set
        """
        environ = os.environ if environ is None else environ

        kind = environ.get(ENV_KIND, "").strip() or RandomKind.STANDARD
        seed = environ.get(ENV_SEED, "").strip() or None

        config = cls(kind=kind, seed=seed)
        logger.debug("randomness from environment: %s", config)
        return config

    def create(self) -> RandomSource:
        """Return the randomness source described by this config.

        The standard, predefined and crypto kinds share the module-level
        instances; every call for the fixed kind makes a new FixedRandom.
        """
        if self.kind is RandomKind.FIXED:
            return FixedRandom(self.seed)
        if self.kind is RandomKind.PREDEFINED:
            return PREDEFINED_RANDOM
        if self.kind is RandomKind.CRYPTO:
            return CRYPTO_RANDOM
        return STANDARD_RANDOM


def create_random(config: Optional[RandomConfig] = None) -> RandomSource:
    """Randomness source for config, or for the environment when config is omitted."""
    if config is None:
        config = RandomConfig.from_env()
    return config.create()
