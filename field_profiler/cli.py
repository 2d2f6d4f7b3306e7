"""
Command-line interface for the Field Profiler.

Provides commands for:
- Profiling up to three fields of a CSV or JSON file
- Explaining the reported quality metrics
"""

import sys
from pathlib import Path

import click

from field_profiler.core.config import ProfilingConfig
from field_profiler.core.exceptions import (
    ConfigError,
    DataLoadError,
)
from field_profiler.core.logging_config import setup_logging, get_logger
from field_profiler.loaders.factory import load_rows
from field_profiler.profiler.engine import FieldProfiler
from field_profiler.profiler.json_utils import safe_json_dump, safe_json_dumps
from field_profiler.profiler.metric_help import get_metric_help, list_metrics

logger = get_logger(__name__)


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """
    Field Profiler - value distributions and data quality for single fields.

    Profiles selected fields of a tabular file: type detection, frequency
    tables, numeric statistics, temporal and text analysis, and a data
    quality assessment.
    """
    pass


@cli.command()
@click.argument('data_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--field', '-f', 'fields', multiple=True, required=True,
              help='Field to profile (repeat for up to 3 fields)')
@click.option('--format', 'file_format', type=click.Choice(['csv', 'json'], case_sensitive=False),
              default=None, help='File format (default: detected from extension)')
@click.option('--delimiter', '-d', default=None, help='Column delimiter for CSV files. Use "\\t" for tab.')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML file with profiling settings')
@click.option('--max-unique', type=click.IntRange(min=1), default=None,
              help='Distinct values kept in each frequency table (default: 1000)')
@click.option('--json-output', '-j', type=click.Path(dir_okay=False),
              help='Write the JSON report to this file instead of stdout')
@click.option('--parallel', is_flag=True, help='Profile the fields concurrently')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', help='Logging level')
@click.option('--log-file', type=click.Path(), help='Optional log file path')
def profile(data_file, fields, file_format, delimiter, config_file, max_unique, json_output,
            parallel, log_level, log_file):
    """
    Profile fields of DATA_FILE and print a JSON report.

    Examples:

        field-profiler profile orders.csv -f country -f amount

        field-profiler profile events.jsonl -f created_at --json-output report.json
    """
    setup_logging(log_level, log_file)

    try:
        config = ProfilingConfig.from_yaml(config_file) if config_file else ProfilingConfig()
        config = config.with_overrides(max_unique_values=max_unique, parallel=parallel or None)
    except ConfigError as e:
        click.echo(f"❌ Configuration error: {e.message}", err=True)
        sys.exit(1)

    loader_options = {}
    if delimiter:
        loader_options['delimiter'] = '\t' if delimiter == '\\t' else delimiter

    try:
        rows = load_rows(data_file, file_format, **loader_options)
    except DataLoadError as e:
        logger.error(f"Failed to load {data_file}: {e.message}")
        click.echo(f"❌ {e.message}", err=True)
        sys.exit(1)

    report = FieldProfiler(config).profile(rows, list(fields))

    if report.large_dataset_warning:
        click.echo(
            f"⚠️  Large dataset: {report.total_rows:,} rows. Profiling may take a while.",
            err=True
        )

    if json_output:
        output_path = Path(json_output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            safe_json_dump(report.to_dict(), f)
        click.echo(f"✓ Profile written to: {output_path}", err=True)
    else:
        click.echo(safe_json_dumps(report.to_dict()))

    if report.error:
        click.echo(f"❌ {report.error}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('metric', required=False)
def explain(metric):
    """
    Explain a quality metric (lists all metrics when METRIC is omitted).
    """
    if not metric:
        click.echo("Available metrics:\n")
        for key in list_metrics():
            click.echo(f"  • {key}")
        click.echo("\nRun 'field-profiler explain METRIC' for details.")
        return

    help_entry = get_metric_help(metric)
    if help_entry is None:
        click.echo(f"❌ Unknown metric: {metric}", err=True)
        click.echo("Run 'field-profiler explain' to list available metrics.", err=True)
        sys.exit(1)

    click.echo(f"{metric}\n")
    click.echo(help_entry.text)
    click.echo(f"\nLearn more: {help_entry.link}")


if __name__ == '__main__':
    cli()
