#!/usr/bin/env python3
"""
scripts/inspect_capture.py

Inspect a captured page and print its framework fingerprints and score report.

Usage:
    python scripts/inspect_capture.py --capture-path ./captures/page.json
    python scripts/inspect_capture.py --capture-path ./page.html --url https://example.com
    python scripts/inspect_capture.py --capture-path ./captures/page.json --output-path ./report.json
"""

import argparse
import json
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from remixr.data_models.report import Report
from remixr.data_models.scoring import Severity
from remixr.sdk import PageInspector
from remixr.utils.data_utils import load_data
from remixr.utils.exceptions import InvalidBudgetError, UnsupportedFileFormat
from remixr.utils.logger import get_logger


logger = get_logger(name=__name__)
console = Console()

SEVERITY_STYLES = {
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
}
MAX_EVIDENCE_ROWS = 15


def score_style(score: float) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def print_frameworks(report: Report) -> None:
    """Print detected frameworks with versions and component tree sizes."""
    if not report.frameworks.matched:
        console.print(Panel("[dim]No frameworks detected[/dim]", title="Frameworks", box=box.ROUNDED))
        return

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 2))
    table.add_column("Framework", style="cyan")
    table.add_column("Version", style="white")
    table.add_column("Components", justify="right")
    for match in report.frameworks.matched:
        tree = report.frameworks.component_trees.get(match.name)
        table.add_row(match.name, match.version or "-", str(tree.size()) if tree else "-")
    console.print(Panel(table, title="Frameworks", box=box.ROUNDED))


def print_scores(report: Report) -> None:
    """Print one row per metric with its headline detail."""
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 2))
    table.add_column("Metric", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Findings", justify="right")
    table.add_column("Detail", style="dim")

    for metric_name, result in report.scores.metrics.items():
        details = result.details
        headline = (
            details.get("feeling")
            or details.get("tone")
            or details.get("primary")
            or details.get("detected")
            or details.get("balance")
            or details.get("navigation_depth")
            or details.get("intention")
            or details.get("visual_weight")
            or details.get("error")
            or ""
        )
        table.add_row(
            metric_name,
            f"[{score_style(result.score)}]{result.score:.1f}[/{score_style(result.score)}]",
            str(len(result.evidence)),
            escape(str(headline)),
        )
    console.print(Panel(table, title="Scores", box=box.ROUNDED))


def print_evidence(report: Report) -> None:
    """Print the highest-severity findings across all metrics."""
    rank = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}
    findings = [
        (metric_name, finding)
        for metric_name, result in report.scores.metrics.items()
        for finding in result.evidence
        if metric_name in ("dark_patterns", "contrast_audit", "shadow_patterns")
    ]
    if not findings:
        return
    findings.sort(key=lambda item: rank[item[1].severity])

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Severity")
    table.add_column("Metric", style="cyan")
    table.add_column("Category")
    table.add_column("Trigger", style="white")
    for metric_name, finding in findings[:MAX_EVIDENCE_ROWS]:
        style = SEVERITY_STYLES[finding.severity]
        table.add_row(
            f"[{style}]{finding.severity.value}[/{style}]",
            metric_name,
            finding.category,
            escape(finding.trigger_text),
        )
    title = f"Findings ({min(len(findings), MAX_EVIDENCE_ROWS)} of {len(findings)})"
    console.print(Panel(table, title=title, box=box.ROUNDED))


def print_strategy(report: Report) -> None:
    """Print competitor weaknesses and remix opportunities."""
    strategy = report.strategy
    if strategy is None:
        return

    lines = [
        f"[cyan]CTA clarity:[/cyan] {strategy.conversion.cta_clarity}   "
        f"[cyan]Friction:[/cyan] {strategy.conversion.friction_score:.0f}   "
        f"[cyan]Hierarchy:[/cyan] {strategy.neurodynamics.visual_hierarchy_score}",
    ]
    for signal in strategy.attention_engineering:
        lines.append(f"[yellow]Attention:[/yellow] {signal.count} {escape(signal.type)}")
    for weakness in strategy.competitor_weaknesses:
        lines.append(f"[red]Weakness:[/red] {escape(weakness)}")
    console.print(Panel("\n".join(lines), title="Strategy", box=box.ROUNDED))

    if not strategy.remix_opportunities:
        return
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("Type", style="cyan")
    table.add_column("Target")
    table.add_column("Action", style="white")
    for opportunity in strategy.remix_opportunities:
        table.add_row(escape(opportunity.type), escape(opportunity.target), escape(opportunity.action))
    console.print(Panel(table, title="Remix Opportunities", box=box.ROUNDED))


def main() -> None:
    """Inspect a captured page and print the report."""
    parser = argparse.ArgumentParser(
        description="remixr - Inspect a captured page (JSON DOM capture or static HTML)"
    )
    parser.add_argument(
        "--capture-path",
        type=str,
        required=True,
        help="Path to a JSON DOM capture (.json) or a static HTML page (.html)",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Page URL to record in the report metadata",
    )
    parser.add_argument(
        "--tree-max-depth",
        type=int,
        default=10,
        help="Depth budget of the structural tree (default: 10)",
    )
    parser.add_argument(
        "--output-path",
        type=str,
        default=None,
        help="Optional path to write the full report as JSON",
    )
    args = parser.parse_args()

    capture_path = Path(args.capture_path)
    if not capture_path.exists():
        console.print(f"[bold red]Error: capture file not found: {capture_path}[/bold red]")
        sys.exit(1)

    try:
        data = load_data(capture_path)
        inspector = PageInspector(tree_max_depth=args.tree_max_depth)
    except (UnsupportedFileFormat, InvalidBudgetError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    console.print(f"[dim]Inspecting capture: {capture_path}[/dim]")
    if isinstance(data, str):
        report = inspector.inspect_html(data, url=args.url)
    elif isinstance(data, dict):
        if args.url:
            data = {**data, "url": args.url}
        report = inspector.inspect_capture(data)
    else:
        console.print("[bold red]Error: JSON capture must be an object[/bold red]")
        sys.exit(1)

    console.print()
    print_frameworks(report)
    print_scores(report)
    print_evidence(report)
    print_strategy(report)

    if args.output_path:
        output_path = Path(args.output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[green]✓ Report written to {output_path}[/green]")


if __name__ == "__main__":
    main()
