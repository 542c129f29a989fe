# filterview/cli/design_cmd.py

"""
CLI commands for designing FIR kernels.
"""

import logging
from typing import Optional

import click
import numpy as np
from numpy.typing import NDArray
from tabulate import tabulate

from filterview.core.data_handler import save_data
from filterview.core.errors import FilterViewError
from filterview.core.kernels import design_low_pass, design_raised_cosine

logger = logging.getLogger(__name__)


def _emit_kernel(kernel: NDArray[np.float64], output: Optional[str], title: str):
    """Prints the kernel as a table or saves it to `output`."""
    taps = np.arange(kernel.shape[0])
    if output:
        saved = save_data({"tap": taps, "coefficient": np.asarray(kernel)}, output)
        click.echo(f"{title} kernel ({kernel.shape[0]} taps) saved to {saved}")
        return
    rows = [(int(i), f"{c:.12g}") for i, c in zip(taps, kernel)]
    click.echo(title)
    click.echo(tabulate(rows, headers=["Tap", "Coefficient"]))
    click.echo(f"Sum: {float(np.sum(kernel)):.12g}")


@click.group("design")
def design_cmd():
    """Design normalized FIR kernels."""
    pass


@design_cmd.command("raised-cosine")
@click.option("--length", type=int, required=True, help="Number of taps (>= 1).")
@click.option("--beta", type=float, required=True, help="Roll-off factor in [0, 1].")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Save coefficients to a .csv, .json or .npz file instead of printing them.")
def raised_cosine_cmd(length: int, beta: float, output: Optional[str]):
    """Design a raised-cosine kernel."""
    try:
        kernel = design_raised_cosine(length, beta)
        _emit_kernel(kernel, output, f"Raised cosine (length={length}, beta={beta})")
    except (FilterViewError, ValueError) as e:
        raise click.UsageError(str(e))


@design_cmd.command("low-pass")
@click.option("--length", type=int, required=True, help="Number of taps (>= 1).")
@click.option("--cutoff", type=float, required=True,
              help="Cutoff as a fraction of the sampling rate, in (0, 0.5).")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None,
              help="Save coefficients to a .csv, .json or .npz file instead of printing them.")
def low_pass_cmd(length: int, cutoff: float, output: Optional[str]):
    """Design a Hamming-windowed sinc low-pass kernel."""
    try:
        kernel = design_low_pass(length, cutoff)
        _emit_kernel(kernel, output, f"Low-pass (length={length}, cutoff={cutoff})")
    except (FilterViewError, ValueError) as e:
        raise click.UsageError(str(e))
