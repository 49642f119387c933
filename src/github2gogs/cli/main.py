"""Main CLI entry point for github2gogs."""

import sys
from typing import Any, Dict, Optional

import click
import yaml
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .. import __build_time__, __version__
from ..api.exceptions import APIError
from ..config.config import Config
from ..migration.engine import MigrationEngine
from ..utils.logging import setup_logging

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

EXAMPLE = 'Example: github2gogs -token 0123456789abcdef golang https://gogs.some.com'


def _print_version(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    """Print version and build time, then exit with status 1."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f'version {__version__}')
    click.echo(f'build time {__build_time__}')
    ctx.exit(1)


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option(
    '-token',
    '--token',
    'token',
    default='',
    envvar='GOGS_TOKEN',
    help='Access token for the Gogs instance',
)
@click.option(
    '-version',
    '--version',
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help='Show version and build time',
)
@click.option(
    '--insecure',
    is_flag=True,
    help='Skip TLS certificate verification for the Gogs instance',
)
@click.option(
    '--dry-run',
    is_flag=True,
    help='Report what would be migrated without making changes',
)
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(exists=True, dir_okay=False),
    help='Path to configuration file',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose logging',
)
@click.argument('source_username', required=False)
@click.argument('destination_url', required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    token: str,
    insecure: bool,
    dry_run: bool,
    config_path: Optional[str],
    verbose: bool,
    source_username: Optional[str],
    destination_url: Optional[str],
) -> None:
    """Mirror the public GitHub repositories of SOURCE_USERNAME to the Gogs
    instance at DESTINATION_URL."""
    if not source_username or not destination_url:
        click.echo(ctx.get_usage(), err=True)
        click.echo(f'\n{EXAMPLE}', err=True)
        ctx.exit(1)

    setup_logging('DEBUG' if verbose else 'INFO')

    try:
        config = _load_config(
            config_path,
            source_username=source_username,
            destination_url=destination_url,
            token=token,
            insecure=insecure,
            dry_run=dry_run,
        )
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as e:
        err_console.print(f'[red]✗[/red] Invalid configuration: {escape(str(e))}')
        sys.exit(1)

    _setup_logging_with_config(config, verbose)

    if config.migration.dry_run:
        console.print(
            '[yellow]Running in dry-run mode - no changes will be made[/yellow]'
        )

    try:
        engine = MigrationEngine(config, console=console)
        summary = engine.migrate()
    except APIError as e:
        err_console.print(f'[red]✗[/red] Migration failed: {escape(str(e))}')
        if verbose:
            err_console.print_exception()
        sys.exit(1)

    if summary.dry_run:
        console.print(
            f'[green]✓[/green] Dry run completed, '
            f'{summary.to_migrate} repos would be migrated'
        )
    else:
        console.print(f'[green]✓[/green] {len(summary.migrated)} repos migrated')


def _load_config(config_path: Optional[str], **overrides: Any) -> Config:
    """Load configuration from file and apply command line overrides."""
    data: Dict[str, Dict[str, Any]] = {}
    if config_path:
        data = Config.from_file(config_path).dict()

    source = data.setdefault('source', {})
    destination = data.setdefault('destination', {})
    migration = data.setdefault('migration', {})

    source['username'] = overrides['source_username']
    destination['url'] = overrides['destination_url']
    if overrides.get('token'):
        destination['token'] = overrides['token']
    if overrides.get('insecure'):
        destination['insecure'] = True
    if overrides.get('dry_run'):
        migration['dry_run'] = True

    return Config(**data)


def _setup_logging_with_config(config: Config, verbose: bool) -> None:
    """Setup logging with configuration from config file."""
    log_level = 'DEBUG' if verbose else config.logging.level
    setup_logging(
        level=log_level,
        log_file=config.logging.file,
        log_format=config.logging.format,
    )


def main() -> None:
    """Main entry point for the CLI application."""
    load_dotenv()
    try:
        cli()
    except KeyboardInterrupt:
        err_console.print('\n[red]Migration interrupted by user[/red]')
        sys.exit(1)


if __name__ == '__main__':
    main()
