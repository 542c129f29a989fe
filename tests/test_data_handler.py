# tests/test_data_handler.py

import json
from pathlib import Path

import pytest
import numpy as np
import pandas as pd
from numpy.testing import assert_allclose

from filterview.core.data_handler import read_series, save_data

# --- read_series ---

def test_read_csv_value_column(tmp_path: Path):
    csv_file = tmp_path / "samples.csv"
    csv_file.write_text("time,value\n0,1.0\n1,2.0\n2,3.0\n")
    assert_allclose(read_series(csv_file), [1.0, 2.0, 3.0])


def test_read_csv_named_and_fallback_column(tmp_path: Path):
    csv_file = tmp_path / "speed.csv"
    csv_file.write_text("label,speed,other\na,10,1\nb,20,2\n")
    # No 'value' column: first numeric column wins
    assert_allclose(read_series(csv_file), [10.0, 20.0])
    assert_allclose(read_series(csv_file, column="other"), [1.0, 2.0])
    with pytest.raises(ValueError, match="Column 'missing' not found"):
        read_series(csv_file, column="missing")


def test_read_csv_without_numeric_columns(tmp_path: Path):
    csv_file = tmp_path / "text.csv"
    csv_file.write_text("name\nfoo\nbar\n")
    with pytest.raises(ValueError, match="No numeric column"):
        read_series(csv_file)


def test_read_json_records(tmp_path: Path):
    json_file = tmp_path / "samples.json"
    json_file.write_text(json.dumps([{"value": 1.5}, {"value": -0.5}]))
    assert_allclose(read_series(json_file), [1.5, -0.5])


def test_read_npz(tmp_path: Path):
    npz_file = tmp_path / "samples.npz"
    np.savez(npz_file, first=np.arange(4.0), second=np.ones(3))
    assert_allclose(read_series(npz_file), np.arange(4.0))
    assert_allclose(read_series(npz_file, column="second"), np.ones(3))
    with pytest.raises(ValueError, match="not found"):
        read_series(npz_file, column="third")


def test_read_npz_rejects_2d(tmp_path: Path):
    npz_file = tmp_path / "matrix.npz"
    np.savez(npz_file, value=np.ones((2, 2)))
    with pytest.raises(ValueError, match="must be 1D"):
        read_series(npz_file)


def test_read_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_series(tmp_path / "missing.csv")
    wav = tmp_path / "audio.wav"
    wav.write_bytes(b"RIFF")
    with pytest.raises(ValueError, match="Unsupported file format"):
        read_series(wav)

# --- save_data ---

def test_save_dict_as_csv_and_json(tmp_path: Path):
    data = {"raw": np.array([1.0, 2.0]), "filtered": np.array([0.5, 1.5])}
    csv_path = save_data(data, tmp_path / "out" / "trace.csv")
    frame = pd.read_csv(csv_path)
    assert list(frame.columns) == ["raw", "filtered"]
    assert_allclose(frame["filtered"], [0.5, 1.5])

    json_path = save_data(data, tmp_path / "trace.json")
    records = json.loads(json_path.read_text())
    assert records[1] == {"raw": 2.0, "filtered": 1.5}


def test_save_array_and_npz(tmp_path: Path):
    csv_path = save_data(np.array([3.0, 4.0]), tmp_path / "series.csv")
    assert_allclose(read_series(csv_path), [3.0, 4.0])

    npz_path = save_data({"a": np.ones(2), "b": np.zeros(5)}, tmp_path / "arrays.npz")
    with np.load(npz_path) as loaded:
        assert sorted(loaded.files) == ["a", "b"]


def test_save_dataframe(tmp_path: Path):
    frame = pd.DataFrame({"value": [1.0, 2.0]})
    npz_path = save_data(frame, tmp_path / "frame.npz")
    assert_allclose(read_series(npz_path), [1.0, 2.0])


def test_save_errors(tmp_path: Path):
    with pytest.raises(ValueError, match="different lengths"):
        save_data({"a": np.ones(2), "b": np.ones(3)}, tmp_path / "bad.csv")
    with pytest.raises(ValueError, match="Unsupported output file format"):
        save_data(np.ones(2), tmp_path / "bad.wav")
    with pytest.raises(ValueError, match="1D"):
        save_data(np.ones((2, 2)), tmp_path / "bad.csv")
    with pytest.raises(TypeError):
        save_data([1.0, 2.0], tmp_path / "bad.csv")
