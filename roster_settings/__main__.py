"""CLI entry point for the roster settings reader."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from roster_settings.config import VALID_FORMATS, load_config
from roster_settings.domain.exceptions import DomainException
from roster_settings.infrastructure.settings.line_reader import SettingsLineReader
from roster_settings.infrastructure.settings.tokenizer import RosterSettingsTokenizer
from roster_settings.infrastructure.storage.loader import SettingsFileLoader
from roster_settings.presentation.formatter import SettingsFormatter

EXIT_LOAD_ERROR = 1
EXIT_LINE_ERRORS = 2


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--config", "-c",
    default=None,
    help="Path to YAML config file",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(VALID_FORMATS),
    default=None,
    help="Output format: text or json (overrides config/env)",
)
@click.option(
    "--max-length",
    type=int,
    default=None,
    help="Buffer capacity per string, terminator included (overrides config/env)",
)
@click.option(
    "--encoding",
    default=None,
    help="Text encoding of the settings file (overrides config/env)",
)
@click.option(
    "--strict",
    is_flag=True,
    default=None,
    help="Exit with status 2 if any line failed to tokenize (overrides config/env)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging (overrides config/env)",
)
def cli(
    path: Path,
    config: str | None,
    output_format: str | None,
    max_length: int | None,
    encoding: str | None,
    strict: bool | None,
    verbose: bool | None,
) -> None:
    """Tokenize a roster settings file and print its strings line by line.

    Configuration priority: YAML config < env vars (ROSTER_SETTINGS_*) < CLI arguments.
    """
    cli_overrides = {
        "reader.max_token_length": max_length,
        "reader.encoding": encoding,
        "output.format": output_format,
        "output.strict": strict,
        "logging.verbose": verbose,
    }

    formatter = SettingsFormatter()
    try:
        app_config = load_config(config_path=config, cli_overrides=cli_overrides)
    except DomainException as exc:
        click.echo(formatter.format_error(exc), err=True)
        sys.exit(EXIT_LOAD_ERROR)

    log_level = logging.DEBUG if app_config.logging.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        stream = SettingsFileLoader(encoding=app_config.reader.encoding).load(path)
    except DomainException as exc:
        click.echo(formatter.format_error(exc), err=True)
        sys.exit(EXIT_LOAD_ERROR)

    tokenizer = RosterSettingsTokenizer(stream, capacity=app_config.reader.max_token_length)
    lines = list(SettingsLineReader(tokenizer).read_lines())
    click.echo(formatter.format(lines, app_config.output.format), nl=False)

    if app_config.output.strict and any(line.has_error for line in lines):
        sys.exit(EXIT_LINE_ERRORS)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
