from __future__ import annotations

from dataclasses import asdict, dataclass, fields

# Seed used by the "fixed" seed mode of the command line.
DEFAULT_SEED = 20

SEED_MODE_RANDOM = "random"
SEED_MODE_FIXED = "fixed"
SEED_MODES = (SEED_MODE_RANDOM, SEED_MODE_FIXED)


def check_window_length(window_length) -> int:
    """Return `window_length` if it is a positive int, else raise ValueError."""

    if isinstance(window_length, bool) or not isinstance(window_length, int):
        raise ValueError(f"window_length must be an int, got {window_length!r}")
    if window_length < 1:
        raise ValueError(f"window_length must be >= 1, got {window_length}")
    return window_length


@dataclass(frozen=True)
class ModelConfig:
    """Settings a `LanguageModel` is built from.

    Attributes:
        window_length: Number of preceding characters used as the lookup key.
        seed: Fixed seed for reproducible generation, or None for a
            non-reproducible, entropy-seeded random source.
    """

    window_length: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        check_window_length(self.window_length)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an int or None, got {self.seed!r}")

    @property
    def reproducible(self) -> bool:
        return self.seed is not None

    @classmethod
    def from_seed_mode(cls, window_length: int, seed_mode: str, seed: int | None = None) -> "ModelConfig":
        """Build a config from a command-line seed mode ("random" or "fixed")."""

        if seed_mode not in SEED_MODES:
            raise ValueError(f"seed mode must be one of {SEED_MODES}, got {seed_mode!r}")
        if seed is not None:
            return cls(window_length=window_length, seed=seed)
        if seed_mode == SEED_MODE_RANDOM:
            return cls(window_length=window_length, seed=None)
        return cls(window_length=window_length, seed=DEFAULT_SEED)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ModelConfig":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class NormalizeConfig:
    lowercase: bool = False
    strip_accents: bool = False
    normalize_whitespace: bool = False

    @property
    def enabled(self) -> bool:
        return self.lowercase or self.strip_accents or self.normalize_whitespace
