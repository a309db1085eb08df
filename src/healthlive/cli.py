"""CLI for the healthlive export dashboard."""

import json
import logging

import click

DEFAULT_HISTORY = "health_metrics.jsonl"

history_option = click.option(
    "--history", "-H", "history_path", default=DEFAULT_HISTORY, envvar="HEALTHLIVE_HISTORY",
    show_default=True, type=click.Path(dir_okay=False),
    help="JSONL file holding ingested export records.",
)
range_option = click.option(
    "--range", "-r", "range_text", default="60d", show_default=True,
    help="Recency window: <n>d, <n>w, <n>m or <n>y. Anything else disables filtering.",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """healthlive — wellness scores from Health Auto Export data."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("body", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--token", "-t", default=None, help="Bearer token presented with the export.")
@click.option("--secret", envvar="HAE_TOKEN", default=None,
              help="Expected ingest token (defaults to $HAE_TOKEN).")
@history_option
def ingest(body, token: str | None, secret: str | None, history_path: str) -> None:
    """Accept one export body (JSON file or stdin) and append it to the history."""
    from healthlive.history import append_record
    from healthlive.ingest import IngestError, build_ingest_record, check_bearer

    try:
        payload = json.load(body)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Body is not valid JSON: {e}") from e

    header = f"Bearer {token}" if token else None
    try:
        check_bearer(header, secret)
        record = build_ingest_record(payload)
    except IngestError as e:
        raise click.ClickException(f"{e} ({e.status})") from e

    path = append_record(history_path, record)
    click.echo(f"Stored export from {record['ingest_date']} → {path}")


@main.command()
@history_option
@range_option
@click.option("--output", "-o", default=None, help="Write summary JSON to file.")
def derive(history_path: str, range_text: str, output: str | None) -> None:
    """Derive scores and trends and print them as JSON."""
    from healthlive.history import load_history
    from healthlive.analytics.pipeline import run_pipeline

    records = load_history(history_path, range_text)
    summary = run_pipeline(records)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(summary.to_json())
        click.echo(f"Summary written to {output}")
    else:
        click.echo(summary.to_json())


@main.command()
@history_option
@range_option
@click.option("--no-table", is_flag=True, help="Only show the summary cards.")
def show(history_path: str, range_text: str, no_table: bool) -> None:
    """Print the dashboard cards and metrics table."""
    from healthlive.history import load_history
    from healthlive.analytics.pipeline import run_pipeline
    from healthlive.report import format_summary

    records = load_history(history_path, range_text)
    summary = run_pipeline(records)
    click.echo(format_summary(summary, show_table=not no_table))


if __name__ == "__main__":
    main()
