"""PulseCheck CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from pulsecheck import __version__
from pulsecheck.config import PulseCheckConfig
from pulsecheck.errors import PulseCheckError
from pulsecheck.model.results import NpsResult

_DEFAULTS = PulseCheckConfig()


def _format_nps(result: NpsResult | None) -> str:
    if result is None:
        return "n/a (no NPS question)"
    sign = "+" if result.score > 0 else ""
    return (
        f"{sign}{result.score} ({result.promoters} promoters, "
        f"{result.passives} passives, {result.detractors} detractors)"
    )


@click.group()
@click.version_option(version=__version__, prog_name="pulsecheck")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
def cli(log_level: str) -> None:
    """PulseCheck: employee pulse-survey analytics."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("export_file", type=click.Path(exists=True))
@click.option("--employees", type=click.IntRange(min=0), default=None,
              help="Roster size (defaults to the survey's totalParticipants)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def report(export_file: str, employees: int | None, as_json: bool) -> None:
    """Analyze a survey export (JSON with survey and responses)."""
    from pulsecheck.adapters.json_adapter import JSONSurveyAdapter
    from pulsecheck.analytics.report import analytics_to_dict, analyze_survey

    adapter = JSONSurveyAdapter(export_file)
    try:
        responses = adapter.fetch()
        analytics = analyze_survey(adapter.survey, responses, total_employees=employees)
    except PulseCheckError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(analytics_to_dict(analytics), indent=2, ensure_ascii=False))
        return

    rate = analytics.response_rate
    click.echo(f"Survey: {adapter.survey.title or analytics.survey_id}")
    click.echo(f"Responses: {analytics.response_count}")
    click.echo(f"Response rate: {rate.rate:.1f}% ({rate.pending} pending)")
    click.echo(f"eNPS: {_format_nps(analytics.enps)}")
    if analytics.leadership_nps is not None:
        click.echo(f"Leadership NPS: {_format_nps(analytics.leadership_nps)}")

    click.echo()
    click.echo("Categories:")
    for name, score in analytics.category_scores.items():
        status = score.status.value if score.applicable else "-"
        click.echo(f"  {name}: {score.display_score()} {status}")

    if analytics.top_issues:
        click.echo()
        click.echo("Needs attention:")
        for item in analytics.top_issues:
            click.echo(f"  {item.category} ({item.score}%)")
    if analytics.top_strengths:
        click.echo()
        click.echo("Strengths:")
        for item in analytics.top_strengths:
            click.echo(f"  {item.category} ({item.score}%)")


@cli.command()
@click.argument("scores", nargs=-1, type=int)
def nps(scores: tuple[int, ...]) -> None:
    """Compute NPS for 0-10 SCORES."""
    from pulsecheck.analytics.scoring import calculate_nps

    try:
        result = calculate_nps(scores)
    except PulseCheckError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"NPS: {_format_nps(result)} of {result.total}")


@cli.command()
@click.argument("scores", nargs=-1, type=int)
def likert(scores: tuple[int, ...]) -> None:
    """Compute Likert favorability for 1-5 SCORES."""
    from pulsecheck.analytics.scoring import calculate_likert_score

    try:
        result = calculate_likert_score(scores)
    except PulseCheckError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Favorability: {result.score}% (average {result.average:.2f}, n={result.count})")


@cli.command()
@click.option("--host", default=_DEFAULTS.host, show_default=True, help="Host to bind to")
@click.option("--port", default=_DEFAULTS.port, type=int, show_default=True, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the PulseCheck analytics API."""
    from pulsecheck.web.app import create_app

    config = PulseCheckConfig(host=host, port=port)
    app = create_app(pulse_config=config)
    click.echo(f"Starting PulseCheck on {host}:{port}")
    app.run(host=config.host, port=config.port, debug=debug)
