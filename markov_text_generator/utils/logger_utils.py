# logger_utils.py - logging setup and timing metrics

import logging
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "markov_text_generator"

logger = logging.getLogger(PACKAGE_LOGGER)


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Route the package logger through a RichHandler.
    Quiet (warnings only) by default, DEBUG when verbose.
    Calling it again replaces the previous handler.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


class Log:
    """Small helpers for recording metrics on the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts) at INFO level.
        Example: train done: 0.012s
        """
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure a code block and log its duration as a metric.
            with Log.time_block("train"):
                model.train(path)
        """
        return _Timer(label)


class _Timer:
    """Context manager behind Log.time_block."""

    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.duration = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.duration = round(time.perf_counter() - self.start, 3)
        if exc_type is None:
            Log.metric(f"{self.label} done", self.duration, "s")
        else:
            Log.metric(f"{self.label} failed after", self.duration, "s")
