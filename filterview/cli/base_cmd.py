# filterview/cli/base_cmd.py

"""
Base setup for CLI commands: configuration loading, logging initialization and
options shared by several commands.
"""

import logging
import sys
from typing import Optional, Union

import click

from filterview.config import FilterViewConfig, load_configuration
from filterview.core.kernels import FILTER_FAMILIES, LowPassSpec, RaisedCosineSpec
from filterview.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class ConfigGroup(click.Group):
    """
    A Click Group that loads configuration and sets up logging before invoking
    the group or its subcommands. The config is passed via ctx.obj['config'].
    """
    def invoke(self, ctx: click.Context):
        if ctx.obj is None:
            ctx.obj = {}

        try:
            if 'config' not in ctx.obj:
                config = load_configuration()
                ctx.obj['config'] = config

                verbosity = 0
                if ctx.params.get('quiet', False):
                    verbosity = -1
                elif ctx.params.get('verbose', 0) > 0:
                    verbosity = ctx.params['verbose']
                setup_logging(config, verbosity)
                logger.debug("Logging setup complete in ConfigGroup.")
            else:
                logger.debug("Configuration already loaded in context.")
        except Exception as e:
            logging.getLogger("filterview.error").critical(f"Critical error during CLI setup: {e!r}", exc_info=True)
            print(f"CRITICAL SETUP ERROR: {e!r}", file=sys.stderr)
            ctx.exit(1)

        # Exceptions from the command itself propagate to Click
        return super().invoke(ctx)


def get_config(ctx: click.Context) -> FilterViewConfig:
    """Returns the configuration loaded by ConfigGroup (defaults if absent)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get('config'), FilterViewConfig):
        return obj['config']
    logger.debug("No configuration in context; using defaults.")
    return FilterViewConfig()


def resolve_filter_spec(
    config: FilterViewConfig,
    family: Optional[str] = None,
    length: Optional[int] = None,
    beta: Optional[float] = None,
    cutoff: Optional[float] = None,
) -> Union[RaisedCosineSpec, LowPassSpec]:
    """
    Builds a filter spec from CLI options, falling back to the [filter] section
    of the configuration for anything not given on the command line.
    """
    overrides = {"length": length, "beta": beta, "cutoff": cutoff}
    update = {key: value for key, value in overrides.items() if value is not None}
    if family:
        update["family"] = family.replace("-", "_")
    return config.filter.model_copy(update=update).to_spec()


# --- Common CLI Options ---
verbose_option = click.option(
    '-v', '--verbose',
    count=True,
    help="Increase verbosity level (-v for INFO, -vv for DEBUG)."
)
quiet_option = click.option(
    '-q', '--quiet',
    is_flag=True,
    default=False,
    help="Suppress all console output except critical errors."
)


def filter_options(func):
    """Adds --family/--length/--beta/--cutoff options (defaults come from config)."""
    func = click.option("--cutoff", type=float, default=None,
                        help="Low-pass cutoff as a fraction of the sampling rate, in (0, 0.5).")(func)
    func = click.option("--beta", type=float, default=None, help="Raised-cosine roll-off factor in [0, 1].")(func)
    func = click.option("--length", type=int, default=None, help="Number of filter taps. [default: from config]")(func)
    func = click.option("--family", type=click.Choice([f.replace("_", "-") for f in FILTER_FAMILIES]), default=None,
                        help="Filter family. [default: from config]")(func)
    return func
