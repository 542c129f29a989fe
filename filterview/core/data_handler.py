# filterview/core/data_handler.py

"""
Reads sample series from, and writes results to, files.

Supports tabular data (CSV, JSON) via Pandas and numerical data (NPZ) via NumPy.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import pandas as pd
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

TABULAR_FORMATS = {".csv", ".json"}
ARRAY_FORMATS = {".npz"}
SUPPORTED_READ_FORMATS = TABULAR_FORMATS | ARRAY_FORMATS
SUPPORTED_WRITE_FORMATS = TABULAR_FORMATS | ARRAY_FORMATS

DEFAULT_COLUMN = "value"

SaveInput = Union[pd.DataFrame, NDArray[Any], Dict[str, NDArray[Any]]]


def _select_column(frame: pd.DataFrame, column: Optional[str], source: Path) -> pd.Series:
    if column is not None:
        if column not in frame.columns:
            raise ValueError(f"Column '{column}' not found in {source.name}. Available: {list(frame.columns)}")
        return frame[column]
    if DEFAULT_COLUMN in frame.columns:
        return frame[DEFAULT_COLUMN]
    numeric = frame.select_dtypes(include=[np.number])
    if numeric.shape[1] == 0:
        raise ValueError(f"No numeric column found in {source.name}.")
    logger.debug(f"No '{DEFAULT_COLUMN}' column in {source.name}; using '{numeric.columns[0]}'.")
    return numeric.iloc[:, 0]


def read_series(file_path: Union[str, Path], column: Optional[str] = None) -> NDArray[np.float64]:
    """
    Loads a 1D sample series from a CSV, JSON or NPZ file.

    Args:
        file_path: Path to the input file.
        column: Column (CSV/JSON) or array key (NPZ) to read. Defaults to
                'value' when present, otherwise the first numeric column
                (or the first array in an NPZ file).

    Returns:
        The samples as a float64 array.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the requested data is missing.
    """
    fpath = Path(file_path)
    if not fpath.is_file():
        raise FileNotFoundError(f"Input file not found: {fpath}")
    ext = fpath.suffix.lower()
    if ext not in SUPPORTED_READ_FORMATS:
        raise ValueError(f"Unsupported file format: '{ext}'. Supported formats: {sorted(SUPPORTED_READ_FORMATS)}")

    logger.info(f"Reading samples from: {fpath}")
    if ext == ".npz":
        with np.load(fpath) as npz_file:
            if not npz_file.files:
                raise ValueError(f"NPZ file {fpath.name} contains no arrays.")
            key = column if column is not None else (DEFAULT_COLUMN if DEFAULT_COLUMN in npz_file.files else npz_file.files[0])
            if key not in npz_file.files:
                raise ValueError(f"Array '{key}' not found in {fpath.name}. Available: {npz_file.files}")
            data = np.asarray(npz_file[key], dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"Array '{key}' in {fpath.name} must be 1D, got shape {data.shape}.")
        return data

    if ext == ".csv":
        frame = pd.read_csv(fpath)
    else:
        try:
            frame = pd.read_json(fpath, orient="records")
        except ValueError:
            logger.warning(f"Failed to read JSON with orient='records' for {fpath.name}, trying line-delimited.")
            frame = pd.read_json(fpath, lines=True)
    return _select_column(frame, column, fpath).to_numpy(dtype=np.float64)


def save_data(data: SaveInput, output_path: Union[str, Path]) -> Path:
    """
    Saves a DataFrame, a 1D array or a dictionary of arrays.

    The extension of `output_path` selects the format. Dictionaries are written
    to CSV/JSON as columns (arrays must share a length) and to NPZ as named arrays.

    Returns:
        The resolved output path.

    Raises:
        ValueError: If the format is unsupported or the data cannot be written to it.
        TypeError: If the data type is not supported.
    """
    fpath = Path(output_path).resolve()
    ext = fpath.suffix.lower()
    if ext not in SUPPORTED_WRITE_FORMATS:
        raise ValueError(f"Unsupported output file format: '{ext}'. Supported formats: {sorted(SUPPORTED_WRITE_FORMATS)}")
    fpath.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Saving data to: {fpath} (format: {ext})")

    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise ValueError(f"Only 1D arrays can be saved directly, got shape {data.shape}.")
        data = {DEFAULT_COLUMN: data}

    if isinstance(data, dict):
        if ext == ".npz":
            np.savez(fpath, **{key: np.asarray(value) for key, value in data.items()})
            return fpath
        lengths = {len(value) for value in data.values()}
        if len(lengths) > 1:
            raise ValueError(f"Cannot write arrays of different lengths {sorted(lengths)} as table columns; use .npz.")
        data = pd.DataFrame({key: np.asarray(value) for key, value in data.items()})

    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"Unsupported data type for saving: {type(data)}. See SaveInput type alias.")

    if ext == ".csv":
        data.to_csv(fpath, index=False)
    elif ext == ".json":
        data.to_json(fpath, orient="records", indent=2)
    else:
        np.savez(fpath, **{str(col): data[col].to_numpy() for col in data.columns})
    return fpath
