"""Command-line interface for the Naive Bayes text classifier.

Provides ``train``, ``test``, and ``predict`` commands with plain-text,
rich, or JSON output using the ``click`` and ``rich`` libraries.

Usage::

    bayes-classifier train train.csv
    bayes-classifier test train.csv test.csv
    bayes-classifier predict train.csv "win the game"
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import Settings, parse_delimiter
from .errors import ClassifierError, SourceUnavailableError
from .evaluation import evaluate
from .predictor import Predictor
from .records import read_records
from .report import (
    format_test_text,
    format_training_text,
    render_test_rich,
    render_training_rich,
    training_to_dict,
)
from .model import NaiveBayesModel
from .trainer import Trainer, TrainingOutcome

console = Console()
err_console = Console(stderr=True)

_OUTPUT_CHOICE = click.Choice(["text", "rich", "json"])


def _configure_logging(verbose: bool) -> None:
    """Route package logs through rich on stderr."""
    logger = logging.getLogger("bayes_text_classifier")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _fail(exc: Exception) -> NoReturn:
    """Print an error and exit with status 1."""
    if isinstance(exc, SourceUnavailableError):
        err_console.print(f"[bold red]{escape(str(exc))}[/]", soft_wrap=True)
    else:
        err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
    sys.exit(1)


def _train(settings: Settings, train_file: Path) -> TrainingOutcome:
    outcome = Trainer().train_file(train_file, **settings.record_options)
    if not outcome.ok:
        _fail(outcome.error)
    return outcome


@click.group()
@click.version_option(package_name="bayes-text-classifier")
@click.option("--label-field", default=None, help="Header name of the label column.")
@click.option("--text-field", default=None, help="Header name of the text column.")
@click.option("--delimiter", default=None, help="Field delimiter (use '\\t' or 'tab' for tabs).")
@click.option("--encoding", default=None, help="Encoding of record files.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    label_field: str | None,
    text_field: str | None,
    delimiter: str | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Naive Bayes text classifier.

    Train on a CSV file of labeled posts and classify new text. Record
    files need a header row with a label column (default ``tag``) and a
    text column (default ``content``).
    """
    _configure_logging(verbose)
    try:
        settings = Settings.from_env().override(
            label_field=label_field,
            text_field=text_field,
            delimiter=parse_delimiter(delimiter) if delimiter is not None else None,
            encoding=encoding,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    ctx.obj = settings


@main.command()
@click.argument("train_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=_OUTPUT_CHOICE, default="text", help="Output format.")
@click.option("--top-words", "-n", type=click.IntRange(min=0), default=0,
              help="Also show the N most informative words per label.")
@click.pass_obj
def train(settings: Settings, train_file: Path, output: str, top_words: int) -> None:
    """Train on TRAIN_FILE and print the learned parameters.

    Example: bayes-classifier train train.csv
    """
    outcome = _train(settings, train_file)
    model = outcome.unwrap()

    if output == "json":
        click.echo(json.dumps(training_to_dict(model, top_words), indent=2))
    elif output == "rich":
        render_training_rich(console, model, top_words=top_words)
    else:
        click.echo(format_training_text(model, outcome.records, verbose=True))
        if top_words > 0:
            _echo_top_words(model, top_words)


@main.command()
@click.argument("train_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("test_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=_OUTPUT_CHOICE, default="text", help="Output format.")
@click.option("--precision", "-p", type=click.IntRange(min=0), default=None,
              help="Decimal places for scores.")
@click.pass_obj
def test(
    settings: Settings,
    train_file: Path,
    test_file: Path,
    output: str,
    precision: int | None,
) -> None:
    """Train on TRAIN_FILE, then predict every record in TEST_FILE.

    Example: bayes-classifier test train.csv test.csv
    """
    settings = settings.override(score_precision=precision)
    outcome = _train(settings, train_file)
    model = outcome.unwrap()

    try:
        records = read_records(test_file, **settings.record_options)
        report = evaluate(Predictor(model), records)
    except ClassifierError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    elif output == "rich":
        render_test_rich(console, report, precision=settings.score_precision)
    else:
        click.echo(format_training_text(model, verbose=False))
        click.echo(format_test_text(report, precision=settings.score_precision))


@main.command()
@click.argument("train_file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("texts", nargs=-1, required=True)
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text",
              help="Output format.")
@click.pass_obj
def predict(settings: Settings, train_file: Path, texts: tuple[str, ...], output: str) -> None:
    """Train on TRAIN_FILE and classify each TEXT argument.

    Example: bayes-classifier predict train.csv "win the game"
    """
    model = _train(settings, train_file).unwrap()

    try:
        predictions = Predictor(model).predict_batch(texts)
    except ClassifierError as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(
            [{"text": t, **p.to_dict()} for t, p in zip(texts, predictions)],
            indent=2,
        ))
        return

    for text, prediction in zip(texts, predictions):
        click.echo(
            f"predicted = {prediction.label}, "
            f"log-probability score = {prediction.score:.{settings.score_precision}f}"
        )
        click.echo(f"  content = {text}")


def _echo_top_words(model: NaiveBayesModel, top_n: int) -> None:
    click.echo("most informative words:")
    for label in model.labels:
        words = ", ".join(w for w, _ in model.most_informative_words(label, top_n))
        click.echo(f"  {label}: {words}")
    click.echo("")


if __name__ == "__main__":
    main()
