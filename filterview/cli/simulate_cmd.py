# filterview/cli/simulate_cmd.py

"""
CLI command that drives a streaming session from a synthetic source and saves
the traces and spectra it produces.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from filterview.core.data_handler import save_data
from filterview.core.errors import FilterViewError
from filterview.core.session import StreamSession
from filterview.core.signals import SIGNAL_SOURCES, get_source
from filterview.core.spectrum import spectrum_bins, spectrum_frequencies
from filterview.utils.visualizations import plot_spectrum_frames, plot_time_series
from .base_cmd import filter_options, get_config, resolve_filter_spec

logger = logging.getLogger(__name__)


def _spectrum_path(output: Path) -> Path:
    return output.with_name(f"{output.stem}_spectrum{output.suffix}")


@click.command("simulate")
@click.option("-o", "--output", type=click.Path(dir_okay=False, resolve_path=True), required=True,
              help="Output file for the raw/filtered traces; spectra go to '<name>_spectrum<ext>'.")
@click.option("--steps", type=int, default=400, show_default=True, help="Number of samples to stream.")
@click.option("--signal", type=click.Choice(sorted(SIGNAL_SOURCES)), default="square", show_default=True,
              help="Synthetic input signal.")
@click.option("--signal-frequency", type=float, default=None,
              help="Signal frequency in Hz. [default: oscillation frequency from config]")
@click.option("--fft-size", type=int, default=None, help="FFT size. [default: from config]")
@click.option("--recent", is_flag=True, default=False,
              help="Analyze the newest samples of each history instead of the oldest.")
@click.option("--plot", "plot_file", type=click.Path(dir_okay=False, resolve_path=True), default=None,
              help="Save a raw vs filtered spectrum plot to this image file.")
@click.option("--trace-plot", "trace_plot_file", type=click.Path(dir_okay=False, resolve_path=True), default=None,
              help="Save a raw vs filtered time-domain plot to this image file.")
@filter_options
@click.pass_context
def simulate_cmd(
    ctx,
    output: str,
    steps: int,
    signal: str,
    signal_frequency: Optional[float],
    fft_size: Optional[int],
    recent: bool,
    plot_file: Optional[str],
    trace_plot_file: Optional[str],
    family: Optional[str],
    length: Optional[int],
    beta: Optional[float],
    cutoff: Optional[float],
):
    """Stream a synthetic signal through the selected filter."""
    config = get_config(ctx)
    fs = config.stream.sampling_rate
    osc = config.oscillation
    frequency = osc.frequency if signal_frequency is None else signal_frequency
    output_path = Path(output)

    source_kwargs = {
        "square": dict(frequency=frequency, low=osc.low, high=osc.high),
        "sine": dict(frequency=frequency, amplitude=osc.high),
        "constant": dict(value=osc.high),
    }[signal]

    try:
        spec = resolve_filter_spec(config, family, length, beta, cutoff)
        session = StreamSession(
            history_size=config.stream.history_size,
            fft_size=config.stream.fft_size if fft_size is None else fft_size,
            prefill=config.stream.prefill,
        )
        samples = get_source(signal)(steps, fs, **source_kwargs)
        trace = session.run(samples, spec)
        raw_frame, filtered_frame = session.spectra(recent=recent)

        saved = save_data({"raw": trace.raw, "filtered": trace.filtered}, output_path)
        size = session.fft_size
        spectrum_saved = save_data(
            {
                "bin": spectrum_bins(size),
                "frequency": spectrum_frequencies(size, fs),
                "raw": raw_frame,
                "filtered": filtered_frame,
            },
            _spectrum_path(output_path),
        )
        if plot_file:
            plot_spectrum_frames({"FFT (Unfiltered)": raw_frame, "FFT (Filtered)": filtered_frame}, plot_file, fs=fs)
        if trace_plot_file:
            plot_time_series(trace.raw, trace.filtered, fs, trace_plot_file)
    except (FilterViewError, ValueError) as e:
        raise click.UsageError(f"Error during simulation: {e}")
    except OSError as e:
        logger.error(f"I/O error during simulation: {e}", exc_info=True)
        raise click.Abort()

    click.echo(f"Streamed {steps} '{signal}' samples through {spec.family} (length={spec.length}).")
    click.echo(f"Traces -> {saved}")
    click.echo(f"Spectra -> {spectrum_saved}")
