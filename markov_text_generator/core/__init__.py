"""
markov_text_generator.core

Character-level Markov language model:
 - corpus streams used as training sources (CharStream)
 - per-window next-character statistics (ObservationList)
 - training and generation (LanguageModel)
 - error types
"""

from .corpus import CharStream, open_corpus
from .errors import (
    ConfigurationError,
    CorpusReadError,
    CorpusTooShortError,
    LanguageModelError,
    SeedTooShortError,
)
from .language_model import LanguageModel
from .observations import CharObservation, ObservationList

__all__ = [
    "CharStream",
    "open_corpus",
    "CharObservation",
    "ObservationList",
    "LanguageModel",
    "LanguageModelError",
    "ConfigurationError",
    "CorpusReadError",
    "CorpusTooShortError",
    "SeedTooShortError",
]
