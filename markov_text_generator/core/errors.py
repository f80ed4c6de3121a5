# errors.py
# exception hierarchy for training and generation.

from __future__ import annotations


class LanguageModelError(Exception):
    """Base class for everything the language model raises."""


class ConfigurationError(LanguageModelError, ValueError):
    """Invalid model configuration, e.g. a non-positive window length."""


class CorpusTooShortError(LanguageModelError):
    """
    The corpus ended before a single full window could be formed.
    The model is left untouched when this is raised.
    """

    def __init__(self, window_length: int, chars_read: int) -> None:
        self.window_length = window_length
        self.chars_read = chars_read
        super().__init__(
            f"corpus has {chars_read} characters, "
            f"need at least {window_length} (window length)"
        )


class SeedTooShortError(LanguageModelError, ValueError):
    """Initial text for generation is shorter than the window."""

    def __init__(self, window_length: int, seed_length: int) -> None:
        self.window_length = window_length
        self.seed_length = seed_length
        super().__init__(
            f"initial text has {seed_length} characters, "
            f"need at least {window_length} (window length)"
        )


class CorpusReadError(LanguageModelError):
    """The corpus could not be decoded with the requested encoding."""

    def __init__(self, source: object, encoding: str, reason: str) -> None:
        self.source = source
        self.encoding = encoding
        super().__init__(f"cannot decode corpus {source} as {encoding}: {reason}")
