"""Fixed-order character-level Markov text generator."""

from markov_text_generator.core import (
    CharObservation,
    CharStream,
    ConfigurationError,
    CorpusReadError,
    CorpusTooShortError,
    LanguageModel,
    LanguageModelError,
    ObservationList,
    SeedTooShortError,
    open_corpus,
)

__all__ = [
    "CharObservation",
    "CharStream",
    "ConfigurationError",
    "CorpusReadError",
    "CorpusTooShortError",
    "LanguageModel",
    "LanguageModelError",
    "ObservationList",
    "SeedTooShortError",
    "open_corpus",
]

__version__ = "0.1.0"
