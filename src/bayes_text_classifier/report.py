"""Human-readable and JSON rendering of training and test results.

The plain-text layout mirrors the classic command-line classifier
output; the rich layout uses tables; JSON carries the raw numbers.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .evaluation import EvaluationReport
from .models import LabeledRecord
from .model import NaiveBayesModel


def _g(value: float) -> str:
    """Six significant digits, like a default C++ stream."""
    return format(value, ".6g")


# ------------------------------------------------------------------
# Plain text
# ------------------------------------------------------------------

def format_training_text(
    model: NaiveBayesModel,
    records: Iterable[LabeledRecord] = (),
    verbose: bool = True,
) -> str:
    """Training summary: rows, counts, priors, and per-word parameters."""
    lines: list[str] = []
    if verbose:
        lines.append("training data:")
        for record in records:
            lines.append(f"  label = {record.label}, content = {record.text}")
    lines.append(f"trained on {model.total_documents()} examples")
    if not verbose:
        lines.append("")
        return "\n".join(lines)

    lines.append(f"vocabulary size = {model.vocabulary_size()}")
    lines.append("")

    lines.append("classes:")
    for summary in model.class_summaries():
        lines.append(
            f"  {summary.label}, {summary.documents} examples, "
            f"log-prior = {_g(summary.log_prior)}"
        )
    lines.append("")

    lines.append("classifier parameters:")
    for param in model.parameters():
        lines.append(
            f"  {param.label}:{param.word}, count = {param.count}, "
            f"log-likelihood = {_g(param.log_likelihood)}"
        )
    lines.append("")
    return "\n".join(lines)


def format_test_text(report: EvaluationReport, precision: int = 1) -> str:
    """Per-record predictions followed by the overall performance line."""
    lines = ["test data:"]
    for result in report.results:
        lines.append(
            f"  correct = {result.record.label}, predicted = {result.prediction.label}, "
            f"log-probability score = {result.prediction.score:.{precision}f}"
        )
        lines.append(f"  content = {result.record.text}")
        lines.append("")
    lines.append(
        f"performance: {report.correct} / {report.total} posts predicted correctly"
    )
    return "\n".join(lines)


# ------------------------------------------------------------------
# Rich tables
# ------------------------------------------------------------------

def render_training_rich(
    console: Console,
    model: NaiveBayesModel,
    top_words: int = 0,
) -> None:
    """Render class and parameter tables for a trained model."""
    console.print(
        f"[bold]Trained on {model.total_documents()} examples[/] | "
        f"Vocabulary: {model.vocabulary_size()} | Labels: {len(model.labels)}"
    )

    classes = Table(title="Classes")
    classes.add_column("Label", style="cyan")
    classes.add_column("Examples", justify="right")
    classes.add_column("Log-prior", justify="right")
    for summary in model.class_summaries():
        classes.add_row(escape(summary.label), str(summary.documents), f"{summary.log_prior:.4f}")
    console.print(classes)

    params = Table(title="Classifier Parameters")
    params.add_column("Label", style="cyan")
    params.add_column("Word", style="white")
    params.add_column("Count", justify="right")
    params.add_column("Log-likelihood", justify="right")
    for param in model.parameters():
        params.add_row(
            escape(param.label), param.word, str(param.count), f"{param.log_likelihood:.4f}"
        )
    console.print(params)

    if top_words > 0:
        for label in model.labels:
            words = model.most_informative_words(label, top_words)
            console.print(
                f"[bold]{escape(label)}[/]: " + ", ".join(f"{w} ({r:+.2f})" for w, r in words)
            )
    console.print()


def render_test_rich(console: Console, report: EvaluationReport, precision: int = 1) -> None:
    """Render per-record predictions and per-label metrics."""
    table = Table(title="Test Results", show_lines=False)
    table.add_column("#", justify="right", width=4)
    table.add_column("Correct", style="cyan")
    table.add_column("Predicted")
    table.add_column("Score", justify="right")
    table.add_column("Content (excerpt)", max_width=60)

    for i, result in enumerate(report.results, 1):
        style = "green" if result.is_correct else "bold red"
        text = result.record.text
        excerpt = text[:80] + ("..." if len(text) > 80 else "")
        table.add_row(
            str(i),
            escape(result.record.label),
            f"[{style}]{escape(result.prediction.label)}[/]",
            f"{result.prediction.score:.{precision}f}",
            escape(excerpt),
        )
    console.print(table)

    metrics = report.metrics
    per_class = Table(title="Per-label Metrics")
    per_class.add_column("Label", style="cyan")
    per_class.add_column("Precision", justify="right")
    per_class.add_column("Recall", justify="right")
    per_class.add_column("F1", justify="right")
    per_class.add_column("Support", justify="right")
    for label in sorted(metrics.per_class):
        m = metrics.per_class[label]
        per_class.add_row(
            escape(label),
            f"{m['precision']:.4f}",
            f"{m['recall']:.4f}",
            f"{m['f1']:.4f}",
            str(metrics.support.get(label, 0)),
        )
    console.print(per_class)
    console.print(
        f"Performance: [bold]{report.correct} / {report.total}[/] "
        f"posts predicted correctly ({metrics.accuracy:.0%})"
    )


# ------------------------------------------------------------------
# JSON payloads
# ------------------------------------------------------------------

def training_to_dict(model: NaiveBayesModel, top_words: int = 0) -> dict:
    data: dict = {
        "total_documents": model.total_documents(),
        "vocabulary_size": model.vocabulary_size(),
        "classes": [s.to_dict() for s in model.class_summaries()],
        "parameters": [p.to_dict() for p in model.parameters()],
    }
    if top_words > 0:
        data["most_informative_words"] = {
            label: model.most_informative_words(label, top_words) for label in model.labels
        }
    return data
