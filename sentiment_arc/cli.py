"""
Command-line interface for sentiment-arc.

Provides commands to analyze texts, evaluate the scorers against labeled
cases, inspect a lexicon, and run the HTTP API.

Usage:
    sentiment-arc analyze "Ce film était vraiment excellent !"
    sentiment-arc analyze --contextual --json "Déçu au début, mais ravi à la fin."
    sentiment-arc compare "Déçu au début, mais ravi à la fin."
    sentiment-arc evaluate cases.json
    sentiment-arc lexicon path/to/lexicon.json
    sentiment-arc serve
"""

import json
import os
import sys
import time
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from sentiment_arc.config.settings import get_settings
from sentiment_arc.lexicon.loader import (
    BUNDLED_LEXICON_PATH,
    LexiconLoadError,
    LexiconLoader,
    load_default_lexicon,
    unmatchable_emoji_keys,
)
from sentiment_arc.observability.logging import setup_logging
from sentiment_arc.observability.metrics import get_metrics


def _echo_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _build_scorers():
    from sentiment_arc.lexical.scorer import LexicalScorer
    from sentiment_arc.structure.analyzer import StructuralAnalyzer

    lexicon = load_default_lexicon()
    scorer = LexicalScorer(lexicon)
    return scorer, StructuralAnalyzer(scorer, lexicon)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--lexicon",
    "lexicon_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Lexicon JSON file (overrides LEXICON_PATH and the bundled lexicon)",
)
def main(debug: bool, lexicon_path: Path | None) -> None:
    """Sentiment Arc - lexicon-based French sentiment analysis."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
    if lexicon_path is not None:
        os.environ["LEXICON_PATH"] = str(lexicon_path)

    # Settings are read once per process; pick up the overrides above
    get_settings.cache_clear()
    load_default_lexicon.cache_clear()

    setup_logging()


@main.command()
@click.argument("text")
@click.option("--contextual", is_flag=True, help="Add structural (contextual) analysis")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
def analyze(text: str, contextual: bool, as_json: bool) -> None:
    """Analyze the sentiment of TEXT."""
    scorer, analyzer = _build_scorers()
    metrics = get_metrics()

    start_time = time.perf_counter()
    if contextual:
        result = analyzer.analyze(text)
        label = result.contextual_sentiment
    else:
        result = scorer.analyze(text)
        label = result.sentiment
    metrics.record_analysis(
        "contextual" if contextual else "lexical",
        label,
        latency=time.perf_counter() - start_time,
    )

    if as_json:
        _echo_json(result.to_dict())
        return

    click.echo(f"Sentiment:  {result.sentiment}")
    click.echo(f"Score:      {result.score:.2f}")
    click.echo(f"Confidence: {result.confidence:.2f}")
    if contextual:
        click.echo(f"Contextual: {result.contextual_sentiment} ({result.contextual_score:.2f})")
        factors = result.context_factors
        if factors.narrative is not None:
            click.echo(f"Narrative:  {factors.narrative.pattern}")
        if result.trends is not None:
            click.echo(f"Trend:      {result.trends.trend}")
            click.echo(f"  {result.trends.description}")


@main.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the full comparison as JSON")
def compare(text: str, as_json: bool) -> None:
    """Compare lexical and contextual analysis of TEXT."""
    from sentiment_arc.evaluation.evaluator import SentimentEvaluator

    scorer, analyzer = _build_scorers()
    comparison = SentimentEvaluator(scorer, analyzer).compare(text)

    if as_json:
        _echo_json(comparison.to_dict())
        return

    click.echo(f"Lexical:    {comparison.base.sentiment} ({comparison.base.score:.2f})")
    click.echo(
        f"Contextual: {comparison.contextual.contextual_sentiment} "
        f"({comparison.contextual.contextual_score:.2f})"
    )
    click.echo(comparison.description)
    for factor in comparison.impact_factors:
        click.echo(f"  {factor.name}: {factor.impact:+.2f} - {factor.description}")


@main.command()
@click.argument("cases_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
def evaluate(cases_file: Path, as_json: bool) -> None:
    """Measure label accuracy against CASES_FILE (JSON list of {text, expectedSentiment})."""
    from sentiment_arc.evaluation.evaluator import SentimentEvaluator, load_cases

    try:
        cases = load_cases(cases_file)
    except ValidationError as e:
        click.echo(click.style(f"Invalid cases file {cases_file}: {e.error_count()} error(s)", fg="red"))
        sys.exit(1)

    scorer, analyzer = _build_scorers()
    report = SentimentEvaluator(scorer, analyzer).evaluate(cases)

    if as_json:
        _echo_json(report.to_dict())
        return

    click.echo(f"\nEvaluation over {report.total} case(s):")
    click.echo("-" * 40)
    click.echo(f"  Lexical:    {report.correct}/{report.total} ({report.accuracy:.0%})")
    click.echo(
        f"  Contextual: {report.contextual_correct}/{report.total} "
        f"({report.contextual_accuracy:.0%})"
    )
    click.echo("-" * 40)
    for outcome in report.details:
        if not (outcome.base.correct and outcome.contextual.correct):
            click.echo(
                f"  expected {outcome.expected!r}, got {outcome.base.sentiment!r} / "
                f"{outcome.contextual.sentiment!r}: {outcome.text}"
            )


@main.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
def lexicon(path: Path | None) -> None:
    """Validate a lexicon file and print its table sizes."""
    path = path or get_settings().lexicon_path or BUNDLED_LEXICON_PATH

    try:
        loaded = LexiconLoader().load(path, strict=True)
    except LexiconLoadError as e:
        click.echo(click.style(f"✗ {e}", fg="red"))
        sys.exit(1)

    click.echo(f"\nLexicon: {path}")
    click.echo("-" * 40)
    for table, count in loaded.summary().items():
        click.echo(f"  {table}: {count}")
    click.echo("-" * 40)
    unmatchable = unmatchable_emoji_keys(loaded)
    if unmatchable:
        click.echo(
            click.style(
                f"! {len(unmatchable)} emoji key(s) can never match: "
                + " ".join(unmatchable),
                fg="yellow",
            )
        )
    click.echo(click.style("Lexicon is valid", fg="green"))


@main.command()
@click.option("--host", default=None, help="API server host")
@click.option("--port", default=None, type=int, help="API server port")
@click.option("--reload", is_flag=True, help="Enable auto-reload (dev only)")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the sentiment API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo(f"Starting API server on {host}:{port}")
    if settings.metrics_enabled:
        click.echo(f"Metrics available on http://localhost:{settings.metrics_port}/metrics")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "sentiment_arc.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
