"""Command-line interface for commit-lint."""
import sys
from pathlib import Path

import click

from commit_lint.__version__ import __version__
from commit_lint.checker import lint
from commit_lint.config import DEFAULT_CONFIG_FILE, load_config
from commit_lint.errors import ConfigError
from commit_lint.logging_config import get_logger, setup_logging
from commit_lint.reader import read_header, read_header_file
from commit_lint.reporter import format_json_report, format_report, get_exit_code


@click.command()
@click.version_option(version=__version__, prog_name="commit-lint")
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option(
    "--file",
    "message_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the header from the first line of this file instead of stdin",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--color/--no-color", default=None, help="Force coloured output on or off")
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
def main(
    config: str | None,
    message_file: str | None,
    output_json: bool,
    color: bool | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Commit-lint: check a commit message header."""
    try:
        setup_logging(verbose=verbose, quiet=quiet, json_output=output_json)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    logger = get_logger(__name__)

    config_path = Path(config) if config else Path.cwd() / DEFAULT_CONFIG_FILE

    try:
        cfg = load_config(config_path)

        if message_file:
            text = read_header_file(Path(message_file))
        else:
            text = read_header(click.get_binary_stream("stdin"))

        parsed, errors = lint(text, cfg)
        logger.info(f"Found {len(errors)} problem(s) in header")

        if output_json:
            click.echo(format_json_report(parsed, errors))
        else:
            use_color = color if color is not None else sys.stdout.isatty()
            click.echo(format_report(text, errors, use_color=use_color), color=use_color)

        sys.exit(get_exit_code(errors))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(130)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except OSError as e:
        click.echo(f"Error: cannot read input: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("Unexpected error during execution")
        click.echo(
            f"An unexpected error occurred: {e}\n" "Run with --verbose for details.", err=True
        )
        sys.exit(2)


if __name__ == "__main__":
    main()
