# config_manager.py - JSON config manager

import json
import os

from markov_text_generator.core.errors import ConfigurationError

DEFAULTS = {
    "fixed_seed": 20,  # seed used by "fixed" generation mode
    "encoding": "utf-8",  # corpus file encoding
}


class Config:
    """Defaults overlaid with an optional JSON file (read only)."""

    def __init__(self, path="markov_textgen.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"bad config file {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"config file {self.path} must hold a JSON object")
        for key, val in loaded.items():
            if key in self.data:
                self.set(key, val)

    def get(self, key):
        return self.data[key]

    def set(self, key, val):
        if key not in self.data:
            raise ConfigurationError(f"no such option: {key}")
        try:
            self.data[key] = type(DEFAULTS[key])(val)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"bad value for {key}: {val!r}") from e
