"""Command-line interface for the post classifier.

Trains on one CSV file of tagged posts, predicts the tag of every post in
a second file, and reports how many predictions were correct. Output is
rendered with ``rich``; ``--output json`` prints machine-readable results.

Usage::

    post-classifier train.csv test.csv
    post-classifier train.csv test.csv --debug
    post-classifier train.csv test.csv --output json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .classifier import Model, evaluate, train
from .errors import ClassifierError
from .models import Document, EvaluationResult
from .parsers import DEFAULT_CONTENT_FIELD, DEFAULT_LABEL_FIELD, read_documents

console = Console()
err_console = Console(stderr=True)


def _fmt(value: float) -> str:
    """Format a log-probability with three significant digits."""
    return f"{value:.3g}"


def _configure_logging(verbose: bool) -> None:
    log = logging.getLogger("post_classifier")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=err_console, show_path=False))


@click.command()
@click.version_option(package_name="post-classifier")
@click.argument("train_file", type=click.Path(path_type=Path))
@click.argument("test_file", type=click.Path(path_type=Path))
@click.option("--debug", is_flag=True, default=False,
              help="Print training data, class priors, and per-word parameters.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.option("--label-field", default=DEFAULT_LABEL_FIELD, show_default=True,
              help="CSV column holding the post label.")
@click.option("--content-field", default=DEFAULT_CONTENT_FIELD, show_default=True,
              help="CSV column holding the post text.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable debug logging on stderr.")
def main(
    train_file: Path,
    test_file: Path,
    debug: bool,
    output: str,
    label_field: str,
    content_field: str,
    verbose: bool,
) -> None:
    """Train a topic classifier on TRAIN_FILE and evaluate it on TEST_FILE.

    Both files are CSV with a header row containing the label and content
    columns.

    Example: post-classifier train.csv test.csv --debug
    """
    _configure_logging(verbose)

    try:
        train_docs = read_documents(train_file, label_field, content_field)
        test_docs = read_documents(test_file, label_field, content_field)
    except ClassifierError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    model = train(train_docs)
    if not model.labels:
        console.print(
            f"[bold red]Error:[/] No scoreable labels in {escape(str(train_file))}. "
            "Train on at least one non-empty post.",
            soft_wrap=True,
        )
        sys.exit(1)

    try:
        if output == "json":
            result = evaluate(model, test_docs)
            click.echo(json.dumps(_json_report(model, result, debug), indent=2))
        else:
            _render_run(model, train_docs, test_docs, debug)
    except ClassifierError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


# ------------------------------------------------------------------
# Rendering helpers
# ------------------------------------------------------------------

def _render_run(
    model: Model,
    train_docs: list[Document],
    test_docs: list[Document],
    debug: bool,
) -> None:
    """Train summary, optional debug report, then per-post predictions."""
    if debug:
        console.print("training data:")
        for doc in train_docs:
            console.print(
                f"  label = {escape(doc.label)}, content = {escape(doc.content)}",
                soft_wrap=True,
            )

    console.print(f"trained on {model.total_documents} examples")
    if debug:
        console.print(f"vocabulary size = {model.vocabulary_size}")
    console.print()

    if debug:
        _render_classes(model)
        _render_parameters(model)

    console.print("test data:")
    result = evaluate(model, test_docs)
    for record in result.records:
        console.print(
            f"  correct = {escape(record.gold_label)}, "
            f"predicted = {escape(record.predicted_label)}, "
            f"log-probability score = {_fmt(record.score)}",
            soft_wrap=True,
        )
        console.print(f"  content = {escape(record.content)}", soft_wrap=True)
        console.print()

    _render_performance(result)


def _render_classes(model: Model) -> None:
    table = Table(title="classes", show_lines=False)
    table.add_column("Label", style="cyan", overflow="fold")
    table.add_column("Examples", justify="right")
    table.add_column("Log-prior", justify="right")

    for label in sorted(model.label_document_count):
        table.add_row(
            escape(label),
            str(model.label_document_count[label]),
            _fmt(model.log_prior(label)),
        )

    console.print(table)


def _render_parameters(model: Model) -> None:
    table = Table(title="classifier parameters", show_lines=False)
    table.add_column("Label", style="cyan", overflow="fold")
    table.add_column("Word", overflow="fold")
    table.add_column("Count", justify="right")
    table.add_column("Log-likelihood", justify="right")

    for label, word, count, log_likelihood in model.parameters():
        table.add_row(escape(label), escape(word), str(count), _fmt(log_likelihood))

    console.print(table)
    console.print()


def _render_performance(result: EvaluationResult) -> None:
    if result.total and result.correct == result.total:
        style = "bold green"
    elif result.accuracy >= 0.5:
        style = "bold yellow"
    else:
        style = "bold red"

    console.print(
        f"performance: [{style}]{result.correct} / {result.total}[/] "
        "posts predicted correctly"
    )


def _json_report(model: Model, result: EvaluationResult, debug: bool) -> dict:
    report = {
        "trained_on": model.total_documents,
        "vocabulary_size": model.vocabulary_size,
        **result.to_dict(),
    }
    if debug:
        report["classes"] = [
            {
                "label": label,
                "examples": model.label_document_count[label],
                "log_prior": round(model.log_prior(label), 4),
            }
            for label in sorted(model.label_document_count)
        ]
        report["parameters"] = [
            {
                "label": label,
                "word": word,
                "count": count,
                "log_likelihood": round(log_likelihood, 4),
            }
            for label, word, count, log_likelihood in model.parameters()
        ]
    return report


if __name__ == "__main__":
    main()
