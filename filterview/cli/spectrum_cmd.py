# filterview/cli/spectrum_cmd.py

"""
CLI command for computing the centered magnitude spectrum of a sample series.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from filterview.core.data_handler import read_series, save_data
from filterview.core.errors import FilterViewError
from filterview.core.spectrum import analyze_recent, analyze_spectrum, spectrum_bins, spectrum_frequencies
from filterview.utils.visualizations import plot_spectrum_frames
from .base_cmd import get_config

logger = logging.getLogger(__name__)


@click.command("spectrum")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("-o", "--output", type=click.Path(dir_okay=False, resolve_path=True), required=True,
              help="Output file (.csv, .json or .npz) with 'bin', 'frequency' and 'magnitude' columns.")
@click.option("--size", type=int, default=None, help="FFT size. [default: from config]")
@click.option("--fs", type=float, default=None, help="Sampling rate in Hz. [default: from config]")
@click.option("--column", type=str, default=None, help="Input column/array holding the samples.")
@click.option("--recent", is_flag=True, default=False,
              help="Analyze the newest samples when the input is longer than the FFT size.")
@click.option("--plot", "plot_file", type=click.Path(dir_okay=False, resolve_path=True), default=None,
              help="Also save a plot of the spectrum to this image file.")
@click.pass_context
def spectrum_cmd(
    ctx,
    input_file: str,
    output: str,
    size: Optional[int],
    fs: Optional[float],
    column: Optional[str],
    recent: bool,
    plot_file: Optional[str],
):
    """Compute a DC-centered magnitude spectrum."""
    config = get_config(ctx)
    size = config.stream.fft_size if size is None else size
    fs = config.stream.sampling_rate if fs is None else fs
    input_path = Path(input_file)
    try:
        samples = read_series(input_path, column=column)
        if samples.shape[0] > size and not recent:
            logger.warning(f"Input has {samples.shape[0]} samples; only the first {size} are analyzed (see --recent).")
        analyze = analyze_recent if recent else analyze_spectrum
        frame = analyze(samples, size)
        saved = save_data(
            {"bin": spectrum_bins(size), "frequency": spectrum_frequencies(size, fs), "magnitude": frame},
            output,
        )
        if plot_file:
            plot_spectrum_frames({input_path.stem: frame}, plot_file, fs=fs)
    except (FilterViewError, ValueError) as e:
        raise click.UsageError(f"Error during spectrum analysis: {e}")
    except OSError as e:
        logger.error(f"I/O error during spectrum analysis: {e}", exc_info=True)
        raise click.Abort()

    click.echo(f"Spectrum of {samples.shape[0]} samples (FFT size {size}) -> {saved}")
