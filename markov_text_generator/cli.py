"""
cli.py - command line front end for the character language model

Usage:
    markov-textgen WINDOW_LENGTH INITIAL_TEXT TEXT_LENGTH {random,fixed} CORPUS

- random: fresh entropy on every run
- fixed: reproducible output using the configured seed (or --seed)
- --show-model prints the learned table with Rich
"""

import argparse
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from markov_text_generator.core.errors import LanguageModelError
from markov_text_generator.core.language_model import LanguageModel
from markov_text_generator.utils.config_manager import Config
from markov_text_generator.utils.logger_utils import configure_logging

# stdout stays plain text for the generated output; everything else goes here
err_console = Console(stderr=True)
console = Console()

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Train a character-level Markov model on a corpus and generate text.",
    )
    parser.add_argument("window_length", type=int, help="characters of context per prediction")
    parser.add_argument("initial_text", help="seed text, at least WINDOW_LENGTH characters")
    parser.add_argument("text_length", type=int, help="requested length of the generated text")
    parser.add_argument("mode", choices=("random", "fixed"), help="random or reproducible generation")
    parser.add_argument("corpus", help="path of the training text")
    parser.add_argument("--seed", type=int, default=None, help="seed for fixed mode (not allowed with random)")
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--show-model", action="store_true", help="print the learned table")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def model_table(model: LanguageModel, limit: int = 50) -> Table:
    """Rich table of window -> observations, first `limit` windows."""
    table = Table(title=f"Model (window={model.window_length})", box=box.SIMPLE, show_edge=False)
    table.add_column("Window", style="cyan")
    table.add_column("Char", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("p", justify="right", style="magenta")
    table.add_column("cp", justify="right", style="dim")

    for i, (window, observations) in enumerate(model.items()):
        if i >= limit:
            break
        for j, obs in enumerate(observations):
            table.add_row(
                Text(repr(window) if j == 0 else ""),
                Text(repr(obs.char)),
                str(obs.count),
                f"{obs.p:.3f}",
                f"{obs.cp:.3f}",
            )
    return table


def run(args: argparse.Namespace) -> int:
    cfg = Config(args.config) if args.config else Config(path=None)
    encoding = cfg.get("encoding")

    if args.mode == "fixed":
        seed = args.seed if args.seed is not None else cfg.get("fixed_seed")
        model = LanguageModel(args.window_length, seed=seed)
    else:
        model = LanguageModel(args.window_length)

    model.train(args.corpus, encoding=encoding)

    if args.show_model:
        err_console.print(model_table(model))

    text = model.generate(args.initial_text, args.text_length)
    print(text)

    requested = len(args.initial_text) + max(args.text_length - args.window_length, 0)
    if args.text_length >= args.window_length and len(text) < requested:
        err_console.print(
            "[dim](stopped early: window "
            + escape(repr(text[-args.window_length:]))
            + " never seen in training)[/dim]"
        )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and args.mode == "random":
        parser.error("--seed only applies to fixed mode")
    configure_logging(args.verbose, console=err_console)

    try:
        return run(args)
    except LanguageModelError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_ERROR
    except OSError as e:
        err_console.print(f"[red]cannot read corpus:[/red] {escape(str(e))}", highlight=False)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
