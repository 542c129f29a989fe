# filterview/config/models.py

"""
Pydantic models for defining the structure and validation of the FilterView
configuration (filterview.toml). Uses Pydantic V2 syntax.
"""

from pathlib import Path
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filterview.core.kernels import LowPassSpec, RaisedCosineSpec

# --- Helper Functions ---

def _resolve_path(path: Union[str, Path]) -> Path:
    """Resolves and expands user paths."""
    return Path(path).expanduser().resolve()

# --- Model Definitions ---

class StreamParams(BaseModel):
    """Sampling and history parameters of a streaming session."""
    sampling_rate: float = Field(500.0, gt=0, description="Sample rate of the incoming stream (Hz).")
    history_size: int = Field(200, ge=1, description="Number of raw/filtered samples kept (oldest evicted first).")
    fft_size: int = Field(512, ge=1, description="FFT size used for spectrum frames.")
    prefill: bool = Field(True, description="Prime both histories with zeros before the first sample.")


class FilterParams(BaseModel):
    """Currently selected filter family and its parameters."""
    family: Literal["raised_cosine", "low_pass"] = "raised_cosine"
    length: int = Field(8, ge=1, description="Number of taps.")
    beta: float = Field(0.5, ge=0.0, le=1.0, description="Raised-cosine roll-off factor.")
    cutoff: float = Field(0.064, gt=0.0, lt=0.5, description="Low-pass cutoff as a fraction of the sampling rate.")

    def to_spec(self) -> Union[RaisedCosineSpec, LowPassSpec]:
        """Returns the tagged filter spec for the selected family."""
        if self.family == "low_pass":
            return LowPassSpec(length=self.length, cutoff=self.cutoff)
        return RaisedCosineSpec(length=self.length, beta=self.beta)


class OscillationParams(BaseModel):
    """Square-wave source used by the simulation command."""
    frequency: float = Field(0.5, gt=0, description="Square-wave frequency (Hz).")
    low: float = 0.0
    high: float = 100.0


class PathsConfig(BaseModel):
    """Configuration for file paths used by FilterView."""
    output_dir: Path = Field(default=Path("./filterview_output"), description="Default directory for saving results.")
    log_directory: Path = Field(default=Path("./filterview_logs"), description="Directory for log files.")

    @field_validator('output_dir', 'log_directory', mode='before')
    @classmethod
    def resolve_paths_before_validation(cls, value: Any) -> Path:
        """Resolves paths before Pydantic validates them."""
        if isinstance(value, (str, Path)):
            return _resolve_path(value)
        return value


class LoggingConfig(BaseModel):
    """Logging configuration settings."""
    log_file_enabled: bool = Field(False, description="Enable/disable persistent file logging.")
    log_filename_template: str = Field("filterview_run_{timestamp:%Y%m%d_%H%M%S}.log", description="Naming pattern for log files.")
    log_level_file: str = Field("DEBUG", description="Minimum level for file logs (DEBUG, INFO, WARNING, ERROR, CRITICAL).")
    log_format: str = Field("%(asctime)s [%(levelname)-8s] %(name)-30s - %(message)s (%(filename)s:%(lineno)d)", description="Format string for file log entries.")

    @field_validator('log_level_file')
    @classmethod
    def check_log_level(cls, value: str) -> str:
        """Validate log level strings."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(f"Invalid log level '{value}'. Must be one of {allowed_levels}")
        return upper_value


class FilterViewConfig(BaseModel):
    """Root configuration model for FilterView."""
    model_config = ConfigDict(
        extra='ignore',
        validate_assignment=True
    )

    stream: StreamParams = Field(default_factory=StreamParams)
    filter: FilterParams = Field(default_factory=FilterParams)
    oscillation: OscillationParams = Field(default_factory=OscillationParams)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
