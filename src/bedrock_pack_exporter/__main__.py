# bedrock_pack_exporter/__main__.py
"""
Main entry point for the bedrock-pack-exporter command-line interface.

Sets up logging from the application settings and assembles the click
commands. All export logic lives in the api/core packages; this module only
wires them to the terminal.
"""

import logging
import sys

import click
from colorama import init as colorama_init

from bedrock_pack_exporter import __version__
from bedrock_pack_exporter.cli import export as export_cli
from bedrock_pack_exporter.config import app_name_title
from bedrock_pack_exporter.instances import get_settings_instance
from bedrock_pack_exporter.logging import log_separator, setup_logging


@click.group()
@click.version_option(__version__, prog_name=app_name_title)
@click.pass_context
def cli(ctx: click.Context):
    """Packages behavior packs, resource packs and world templates for Minecraft Bedrock."""
    try:
        settings = get_settings_instance()
        logger = setup_logging(
            log_dir=settings.get("paths.logs"),
            log_keep=settings.get("retention.logs"),
            file_log_level=settings.get("logging.file_level"),
            cli_log_level=settings.get("logging.cli_level"),
            force_reconfigure=True,
        )
        log_separator(logger, app_name=app_name_title, app_version=__version__)
        logger.info(f"Starting {app_name_title} v{__version__} (CLI context)...")
        colorama_init(autoreset=True)
    except Exception as setup_e:
        logging.getLogger("bedrock_pack_exporter_setup").critical(
            f"An unrecoverable error occurred during CLI startup: {setup_e}",
            exc_info=True,
        )
        click.secho(f"CRITICAL STARTUP ERROR: {setup_e}", fg="red", bold=True)
        sys.exit(1)

    ctx.obj = {"cli": cli}


cli.add_command(export_cli.export_command)
cli.add_command(export_cli.plan_command)


def main():
    """Main execution function wrapped for final, fatal exception handling."""
    try:
        cli()
    except Exception as e:
        logger = logging.getLogger("bedrock_pack_exporter_fatal")
        logger.critical("A fatal, unhandled error occurred.", exc_info=True)
        click.secho(
            f"\nFATAL UNHANDLED ERROR: {type(e).__name__}: {e}", fg="red", bold=True
        )
        click.secho("Please check the logs for more details.", fg="yellow")
        sys.exit(1)


if __name__ == "__main__":
    main()
