"""Command-line interface for disk usage viewer."""

import json
import logging
import os
import sys
import click
from typing import Optional

from .api.handler import HTTP_OK, handle_analyze, handle_drives, handle_os_info
from .config.config_manager import ConfigManager
from .core.analyzer import UsageAnalyzer
from .core.models import UsageResult
from .utils.formatters import render_usage_report


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _load_config(ctx) -> ConfigManager:
    try:
        config_manager = ConfigManager(ctx.obj.get('config_path'))
        config_manager.load_config()
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)
    return config_manager


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (overrides the configuration file)')
@click.option('--log-file',
              help='Log file path (overrides the configuration file)')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Disk Usage Viewer - Report disk space consumption of directory trees."""

    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

    config_manager = _load_config(ctx)
    logging_config = config_manager.get_logging_config()

    setup_logging(log_level or logging_config.get('level', 'INFO'),
                  log_file or logging_config.get('file'))

    ctx.obj['config_manager'] = config_manager


@cli.command()
@click.argument('path', required=False)
@click.option('--depth', '-d', default=None,
              help='Directory levels to expand (1-5)')
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.option('--warnings/--no-warnings', 'collect_warnings', default=None,
              help='Report entries that were skipped because they could not be read')
@click.pass_context
def analyze(ctx, path: Optional[str], depth: Optional[str], output: str,
            collect_warnings: Optional[bool]):
    """Analyze disk usage below PATH (defaults to the filesystem root)."""
    analysis_config = ctx.obj['config_manager'].get_analysis_config()

    if collect_warnings is None:
        collect_warnings = analysis_config['collect_warnings']

    if path:
        path = os.path.abspath(path)

    analyzer = UsageAnalyzer(
        max_workers=analysis_config['max_workers'],
        collect_warnings=collect_warnings
    )

    status, payload = handle_analyze(
        {'path': path, 'depth': depth},
        analyzer=analyzer,
        default_depth=analysis_config['default_depth'],
        max_depth=analysis_config['max_depth']
    )

    if output == 'json':
        click.echo(json.dumps(payload, indent=2))

    if status != HTTP_OK:
        click.echo(f"Error analyzing {path or 'default path'}: {payload['error']}", err=True)
        sys.exit(1)

    if output == 'text':
        click.echo(render_usage_report(UsageResult.from_dict(payload)))


@cli.command('os-info')
def os_info():
    """Show information about the host operating system."""
    _, payload = handle_os_info()
    click.echo(json.dumps(payload, indent=2))


@cli.command()
def drives():
    """List available drive roots (Windows only)."""
    _, payload = handle_drives()
    click.echo(json.dumps(payload, indent=2))


@cli.command('validate-config')
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    config_manager = ctx.obj['config_manager']
    analysis_config = config_manager.get_analysis_config()
    logging_config = config_manager.get_logging_config()

    click.echo("✅ Configuration loaded successfully")
    click.echo(f"\n📊 Configuration Summary:")
    click.echo(f"   Source: {config_manager.config_file or 'built-in defaults'}")
    click.echo(f"   Default depth: {analysis_config['default_depth']}")
    click.echo(f"   Max depth: {analysis_config['max_depth']}")
    click.echo(f"   Max workers: {analysis_config['max_workers']}")
    click.echo(f"   Collect warnings: {analysis_config['collect_warnings']}")
    click.echo(f"   Log level: {logging_config['level']}")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
