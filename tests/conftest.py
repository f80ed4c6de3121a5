# tests/conftest.py - shared fixtures

import pytest

from markov_text_generator.core.language_model import LanguageModel


class ScriptedRandom:
    """Returns pre-set draws in order, so sampling can be checked by hand."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def random(self):
        value = self.draws[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def cyclic_model():
    # every window has exactly one successor, so output is fully determined
    lm = LanguageModel(2, seed=1)
    lm.train_text("abcabcabc")
    return lm


@pytest.fixture
def corpus_file(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(
        "the quick brown fox jumps over the lazy dog. "
        "the dog sleeps while the fox runs through the quiet woods.\n",
        encoding="utf-8",
    )
    return path
