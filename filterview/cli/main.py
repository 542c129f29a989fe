# filterview/cli/main.py

"""
Main entry point for the FilterView CLI application.
Uses Click for command-line interface handling.
"""

import logging

import click

from filterview.version import __version__
from .base_cmd import ConfigGroup, get_config, quiet_option, verbose_option
from .design_cmd import design_cmd
from .filter_cmd import filter_cmd
from .simulate_cmd import simulate_cmd
from .spectrum_cmd import spectrum_cmd

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


@click.group(context_settings=CONTEXT_SETTINGS, cls=ConfigGroup)
@click.version_option(__version__, '-V', '--version', package_name='filterview', prog_name='filterview')
@verbose_option
@quiet_option
@click.pass_context
def main_cli(ctx, verbose: int, quiet: bool):
    """
    FilterView v1.0.0: streaming FIR filtering and centered spectrum analysis.

    Configuration is loaded from:
    Defaults -> ./filterview.toml -> ~/.config/filterview/filterview.toml -> Env Vars

    Use -v for verbose output, -vv for debug output, -q for quiet mode.
    """
    config = get_config(ctx)
    logger.debug(f"FilterView CLI group invoked with filter config: {config.filter.model_dump()}")


main_cli.add_command(design_cmd)
main_cli.add_command(filter_cmd)
main_cli.add_command(spectrum_cmd)
main_cli.add_command(simulate_cmd)

cli = main_cli

if __name__ == "__main__":
    cli()
