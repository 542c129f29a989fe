# filterview/cli/filter_cmd.py

"""
CLI command for FIR-filtering a recorded sample series.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from filterview.core.data_handler import read_series, save_data
from filterview.core.errors import FilterViewError
from filterview.core.filters import fir_filter
from filterview.core.kernels import design_kernel
from .base_cmd import filter_options, get_config, resolve_filter_spec

logger = logging.getLogger(__name__)


@click.command("filter")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("-o", "--output", type=click.Path(dir_okay=False, resolve_path=True), required=True,
              help="Output file (.csv, .json or .npz) with 'raw' and 'filtered' columns.")
@click.option("--column", type=str, default=None, help="Input column/array holding the samples.")
@filter_options
@click.pass_context
def filter_cmd(
    ctx,
    input_file: str,
    output: str,
    column: Optional[str],
    family: Optional[str],
    length: Optional[int],
    beta: Optional[float],
    cutoff: Optional[float],
):
    """Filter a sample series as if it were streamed sample by sample."""
    config = get_config(ctx)
    input_path = Path(input_file)
    try:
        spec = resolve_filter_spec(config, family, length, beta, cutoff)
        logger.info(f"Filtering {input_path.name} with {spec!r}")
        raw = read_series(input_path, column=column)
        filtered = fir_filter(design_kernel(spec), raw)
        saved = save_data({"raw": raw, "filtered": filtered}, output)
    except (FilterViewError, ValueError) as e:
        raise click.UsageError(f"Error during filtering: {e}")
    except OSError as e:
        logger.error(f"I/O error during filtering: {e}", exc_info=True)
        raise click.Abort()

    click.echo(f"Filtered {raw.shape[0]} samples ({spec.family}, length={spec.length}) -> {saved}")
