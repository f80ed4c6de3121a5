# language_model.py
# Fixed-order character-level Markov model.
#
# Training slides a window of `window_length` characters across a corpus and
# counts which character follows each window. A finalization pass turns the
# counts into probabilities (p) and cumulative probabilities (cp). Generation
# extends a seed one character at a time by mapping a uniform draw in [0, 1)
# onto the cp values of the current window.

from __future__ import annotations

import io
import logging
import random
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from markov_text_generator.core.corpus import CharStream, Source, as_char_stream
from markov_text_generator.core.errors import (
    ConfigurationError,
    CorpusReadError,
    CorpusTooShortError,
    SeedTooShortError,
)
from markov_text_generator.core.observations import ObservationList
from markov_text_generator.utils.logger_utils import Log

logger = logging.getLogger(__name__)

Window = str
Table = Dict[Window, ObservationList]


class RandomSource(Protocol):
    """Anything with a random() returning a float in [0, 1), e.g. random.Random."""

    def random(self) -> float:
        ...


def _check_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful length
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return value


class LanguageModel:
    """
    Character-level Markov language model with a fixed window length.

    Randomness:
      - seed given: the model owns random.Random(seed), so the same model,
        seed text and length always produce the same text
      - no seed: random.Random() seeded from the environment
      - rng given: that object is used as is (tests, shared generators)
    Any single generate() call can also be handed its own rng.

    Training more than once accumulates counts; it never resets the table.
    """

    def __init__(
        self,
        window_length: int,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        window_length = _check_int("window_length", window_length)
        if window_length <= 0:
            raise ConfigurationError(f"window_length must be positive, got {window_length}")
        if seed is not None and rng is not None:
            raise ConfigurationError("pass either seed or rng, not both")

        self.window_length = window_length
        self.seed = seed
        self._rng: RandomSource = rng if rng is not None else random.Random(seed)
        # window -> observations, owned by this instance
        self._char_data: Table = {}
        self._trained = False

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train(self, source: Source, encoding: str = "utf-8") -> None:
        """
        Build the model from a corpus: a path, a text file object or a CharStream.
        The corpus is read once, front to back. Nothing is merged into the model
        unless the whole corpus was read and held at least one full window.
        Undecodable input or an unknown encoding raises CorpusReadError.
        """
        try:
            with Log.time_block("train"), as_char_stream(source, encoding=encoding) as stream:
                staged, chars_read = self._count(stream)
        except (UnicodeDecodeError, LookupError) as e:
            raise CorpusReadError(source, encoding, str(e)) from e

        self._merge(staged)
        for observations in self._char_data.values():
            self.calculate_probabilities(observations)
        self._trained = True

        logger.info(
            "trained on %d characters: %d new windows, %d windows total",
            chars_read, len(staged), len(self._char_data),
        )

    def train_text(self, text: str) -> None:
        """Train on an in-memory string."""
        self.train(io.StringIO(text, newline=""))

    def _count(self, stream: CharStream) -> Tuple[Table, int]:
        n = self.window_length
        first: List[str] = []
        while len(first) < n:
            if stream.is_empty():
                raise CorpusTooShortError(n, len(first))
            first.append(stream.read_char())

        window = "".join(first)
        staged: Table = {}
        chars_read = n
        while not stream.is_empty():
            c = stream.read_char()
            chars_read += 1
            observations = staged.get(window)
            if observations is None:
                observations = staged[window] = ObservationList()
            observations.update(c)
            window = window[1:] + c
        return staged, chars_read

    def _merge(self, staged: Table) -> None:
        # characters new to an existing window keep their first-seen order
        for window, observations in staged.items():
            target = self._char_data.get(window)
            if target is None:
                self._char_data[window] = observations
                continue
            for obs in observations:
                target.update(obs.char, obs.count)

    # ------------------------------------------------------------------
    # Probabilities and sampling
    # ------------------------------------------------------------------
    def calculate_probabilities(self, observations: ObservationList) -> None:
        """Compute and set the p and cp fields of every entry in `observations`."""
        observations.calculate_probabilities()

    def get_random_char(
        self, observations: ObservationList, rng: Optional[RandomSource] = None
    ) -> str:
        """
        Draw one character from `observations`.
        Falls back to the last character if no cp exceeds the draw.
        """
        r = (rng if rng is not None else self._rng).random()
        return observations.sample(r)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(
        self,
        initial_text: str,
        text_length: int,
        rng: Optional[RandomSource] = None,
    ) -> str:
        """
        Extend `initial_text` with characters drawn from the model.

        Generates `text_length - window_length` characters after the seed.
        If `text_length` is smaller than the window the seed is returned
        unchanged. Generation stops early, without error, as soon as the
        current window was never seen in training; compare the output
        length to detect that.
        """
        text_length = _check_int("text_length", text_length)
        n = self.window_length
        if text_length < n:
            return initial_text
        if len(initial_text) < n:
            raise SeedTooShortError(n, len(initial_text))

        rng = rng if rng is not None else self._rng
        window = initial_text[-n:]
        target = text_length - n
        generated: List[str] = []

        while len(generated) < target:
            observations = self._char_data.get(window)
            if observations is None:
                logger.debug(
                    "unknown window %r, stopping after %d of %d characters",
                    window, len(generated), target,
                )
                break
            c = self.get_random_char(observations, rng)
            generated.append(c)
            window = window[1:] + c

        return initial_text + "".join(generated)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def is_trained(self) -> bool:
        return self._trained

    def windows(self) -> List[Window]:
        return list(self._char_data)

    def observations(self, window: Window) -> Optional[ObservationList]:
        return self._char_data.get(window)

    def items(self) -> Iterable[Tuple[Window, ObservationList]]:
        return self._char_data.items()

    def counts(self) -> Dict[Window, Dict[str, int]]:
        """Plain nested dict window -> {char: count}."""
        return {
            window: {obs.char: obs.count for obs in observations}
            for window, observations in self._char_data.items()
        }

    def __contains__(self, window: object) -> bool:
        return window in self._char_data

    def __len__(self) -> int:
        return len(self._char_data)

    def __str__(self) -> str:
        """One 'window : (observations)' line per learned window."""
        lines = [f"{window} : {observations}\n" for window, observations in self._char_data.items()]
        return "".join(lines)

    def __repr__(self) -> str:
        return (
            f"LanguageModel(window_length={self.window_length}, "
            f"seed={self.seed!r}, windows={len(self._char_data)})"
        )
