#!/usr/bin/env python3
"""
Command line interface for the QoE scoring engine
"""

import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .__version__ import __version__
from .config import DATA_DOMAINS, DOMAIN_METRICS, get_config
from .scoring.engine import QoEScoreCalculator
from .scoring.rating import classify_score, format_percent
from .snapshot import score_tree_to_dict, snapshot_from_dict
from .utils.logging_config import setup_logging

console = Console()
logger = logging.getLogger(__name__)

RATING_STYLES = {"good": "green", "fair": "yellow", "poor": "red", "unknown": "dim"}

# Display order and labels of the score tree rows
SCORE_ROWS = [
    ("overall", "Overall Quality"),
    ("voice", "Voice Services"),
    ("data", "Data Services"),
    ("http", "  HTTP/FTP Transfer"),
    ("browsing", "  Browsing"),
    ("streaming", "  Video Streaming"),
    ("latency", "  Latency & Interactivity"),
    ("social", "  Social Media"),
]


def _load_snapshot(snapshot_file: str) -> dict:
    try:
        with open(snapshot_file, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON in snapshot file: {e}")

    if not isinstance(payload, dict):
        raise click.BadParameter("The snapshot file must contain a JSON object")
    return payload


def _coverage(key: str, applied_weight: float, cfg) -> float:
    # Data domain weights are fractions of "data", report them relative to the domain share
    if key in DATA_DOMAINS:
        return applied_weight / cfg.domain_shares[key]
    return applied_weight


def _render_scores(tree, cfg) -> Table:
    table = Table(title="QoE Scores")
    table.add_column("Component", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Coverage", justify="right")
    table.add_column("Rating")

    for key, label in SCORE_ROWS:
        node = getattr(tree, key)
        rating = classify_score(node.score)
        style = RATING_STYLES[rating]
        if key in ("data", "voice"):
            table.add_section()
        table.add_row(
            label,
            f"[{style}]{format_percent(node.score)}[/{style}]",
            format_percent(_coverage(key, node.applied_weight, cfg)) if node.score is not None else "--",
            f"[{style}]{rating}[/{style}]",
        )
    return table


@click.group()
@click.version_option(version=__version__, prog_name="QoE Score")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Logging level (default: WARNING)",
)
@click.option("--log-dir", type=click.Path(file_okay=False), help="Also write a rotating log file in this directory")
def cli(log_level: str, log_dir: Optional[str]):
    """Quality-of-Experience scoring for voice and data measurements"""
    setup_logging(log_dir=log_dir or "logs", log_level=log_level, enable_file=log_dir is not None)


@cli.command()
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False), help="Custom scoring configuration")
@click.option("--json", "as_json", is_flag=True, help="Print the score tree as JSON")
def score(snapshot_file: str, config: Optional[str], as_json: bool):
    """
    Score a JSON metrics snapshot

    Example:
        qoe-score score snapshot.json
        qoe-score score snapshot.json --json -c my_weights.yaml
    """
    payload = _load_snapshot(snapshot_file)

    try:
        cfg = get_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ Invalid configuration: {e}[/red]")
        sys.exit(1)

    tree = QoEScoreCalculator(cfg).compute(snapshot_from_dict(payload))
    logger.info(f"Scored {snapshot_file}: overall={tree.overall.score}")

    if as_json:
        click.echo(json.dumps(score_tree_to_dict(tree), indent=2))
        return

    console.print(_render_scores(tree, cfg))
    if tree.overall.score is None:
        console.print("[yellow]No measurement available yet.[/yellow]")


@cli.command()
@click.option("-c", "--config", type=click.Path(exists=True, dir_okay=False), help="Configuration file to display")
def show_config(config: Optional[str]):
    """Display the weights and thresholds in use"""
    try:
        cfg = get_config(config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]❌ Invalid configuration: {e}[/red]")
        sys.exit(1)

    table = Table(title=f"Scoring configuration ({cfg.config_path})")
    table.add_column("Metric", style="cyan")
    table.add_column("Weight", justify="right", style="green")
    table.add_column("Good", justify="right")
    table.add_column("Bad", justify="right")
    table.add_column("Direction")

    table.add_section()
    table.add_row("[bold]OVERALL[/bold]", "", "", "", "")
    for name, weight in cfg.overall_weights.items():
        table.add_row(f"  {name}", f"{weight:g}", "", "", "")

    for domain in ("voice",) + DATA_DOMAINS:
        table.add_section()
        share = "" if domain == "voice" else f"{cfg.domain_shares[domain]:g}"
        table.add_row(f"[bold]{domain.upper()}[/bold]", share, "", "", "")
        weights = cfg.domain_weights(domain)
        for metric in DOMAIN_METRICS[domain]:
            threshold = cfg.threshold(domain, metric)
            table.add_row(
                f"  {metric}",
                f"{weights[metric]:g}",
                f"{threshold.good:g}",
                f"{threshold.bad:g}",
                "higher is better" if threshold.higher_is_better else "lower is better",
            )

    console.print(table)


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
