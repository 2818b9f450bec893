"""
Character-level sliding-window language model.

The model maps every window of `window_length` consecutive corpus characters
to a `FrequencyTable` of the characters that followed it. Generation extends a
seed text one character at a time by sampling from the table of the trailing
window.

Usage:
    model = LanguageModel(window_length=3, seed=20)
    model.train(corpus)
    text = model.generate("the", 200)
"""

from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, Iterator

import numpy as np
import pandas as pd
from sklearn.utils import check_random_state

from .config import ModelConfig, check_window_length
from .frequency import FrequencyTable

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["window", "character", "count", "p", "cp"]


class LanguageModel:
    """
    Learns follower distributions per window and samples text from them.

    Attributes:
        window_length: Number of preceding characters used as the lookup key
        seed: The fixed seed, or None when the random source is entropy-seeded
    """

    def __init__(self, window_length: int, seed: int | np.random.RandomState | None = None):
        """
        Build an untrained model.

        Args:
            window_length: Positive number of characters per window
            seed: int or numpy RandomState for reproducible output, None for
                a fresh entropy-seeded random source

        Raises:
            ValueError: If window_length is not a positive int, or seed is
                not an int, RandomState or None
        """
        self.window_length = check_window_length(window_length)
        self.seed = seed
        # A fresh instance even when unseeded; never numpy's global state.
        if seed is None:
            self._random_state = np.random.RandomState()
        else:
            self._random_state = check_random_state(seed)
        self._tables: dict[str, FrequencyTable] = {}
        self._trained = False

    @classmethod
    def from_config(cls, config: ModelConfig) -> "LanguageModel":
        return cls(config.window_length, seed=config.seed)

    @property
    def trained(self) -> bool:
        return self._trained

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def windows(self) -> list[str]:
        return list(self._tables)

    def table_for(self, window: str) -> FrequencyTable | None:
        """Return the finalized table of `window`, or None if it was never seen."""
        return self._tables.get(window)

    def random_unit(self) -> float:
        """Draw a float uniformly from [0, 1) using this model's random source."""
        return float(self._random_state.random_sample())

    def train(self, corpus: Iterable[str]) -> None:
        """
        Build the window mapping from `corpus` in a single pass.

        The first `window_length` characters form the initial window. Each
        following character is recorded in the current window's table, then
        the window slides by one. Every table is finalized once at the end.
        A corpus no longer than `window_length` leaves the mapping empty.

        Args:
            corpus: A string or any iterable of single characters

        Raises:
            RuntimeError: If the model was already trained
        """
        if self._trained:
            raise RuntimeError("model is already trained; build a new LanguageModel to retrain")

        chars: Iterator[str] = iter(corpus)
        window = "".join(islice(chars, self.window_length))
        tables: dict[str, FrequencyTable] = {}
        n_chars = len(window)

        for c in chars:
            table = tables.get(window)
            if table is None:
                table = tables[window] = FrequencyTable()
            table.record(c)
            window = window[1:] + c
            n_chars += 1

        for table in tables.values():
            table.finalize()

        self._tables = tables
        self._trained = True

        if not tables:
            logger.warning(
                f"Corpus of {n_chars} characters is too short for window length "
                f"{self.window_length}; model is empty"
            )
        else:
            logger.info(f"Trained on {n_chars} characters: {len(tables)} distinct windows")

    def generate(self, seed_text: str, length: int) -> str:
        """
        Extend `seed_text` by up to `length` sampled characters.

        If `seed_text` is shorter than the window or its trailing window was
        never seen in training, it is returned unchanged. If generation
        reaches a window that has no recorded followers, it stops there and
        returns what was generated so far.

        Args:
            seed_text: Text to continue
            length: Number of characters to append (>= 0)

        Returns:
            seed_text followed by the generated characters

        Raises:
            ValueError: If length is negative or not an int
        """
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise ValueError(f"length must be a non-negative int, got {length!r}")

        if len(seed_text) < self.window_length:
            logger.debug(f"Seed text {seed_text!r} is shorter than window length {self.window_length}")
            return seed_text

        frame = seed_text[-self.window_length:]
        if frame not in self._tables:
            logger.debug(f"Trailing window {frame!r} was not seen in training")
            return seed_text

        out = list(seed_text)
        for step in range(length):
            table = self._tables.get(frame)
            if table is None:
                logger.warning(
                    f"No followers recorded for window {frame!r}; "
                    f"stopping after {step} of {length} characters"
                )
                break
            c = table.sample(self.random_unit())
            out.append(c)
            frame = frame[1:] + c

        return "".join(out)

    def counts(self) -> dict[str, dict[str, int]]:
        """Snapshot of raw counts: {window: {character: count}}."""
        return {
            window: {entry.character: entry.count for entry in table}
            for window, table in self._tables.items()
        }

    def to_frame(self) -> pd.DataFrame:
        """One row per (window, follower) with its count, p and cp."""
        rows = [
            (window, entry.character, entry.count, entry.p, entry.cp)
            for window, table in self._tables.items()
            for entry in table
        ]
        return pd.DataFrame(rows, columns=FRAME_COLUMNS)

    def __str__(self) -> str:
        return "".join(f"{window} : {table}\n" for window, table in self._tables.items())

    def __repr__(self) -> str:
        return (
            f"LanguageModel(window_length={self.window_length}, seed={self.seed!r}, "
            f"windows={len(self._tables)})"
        )
