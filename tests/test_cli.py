import io

import numpy as np
import pytest

from splmeter.cli import iter_blocks, main

CALIBRATION_TEXT = "Sens Factor =-1.378dB, AGain =0dB\n20 0.0\n24000 0.0\n"


class _TrickleStream:
    """Returns at most a few bytes per read, like a slow pipe."""

    def __init__(self, data, step):
        self._data = data
        self._step = step

    def read(self, size):
        size = min(size, self._step)
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk


def _samples_bytes(values):
    return np.asarray(values, dtype="<f4").tobytes()


def test_iter_blocks_splits_and_keeps_remainder():
    stream = io.BytesIO(_samples_bytes(np.arange(10)))
    blocks = list(iter_blocks(stream, 4))
    assert [b.tolist() for b in blocks] == [
        [0.0, 1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0, 7.0],
        [8.0, 9.0],
    ]


def test_iter_blocks_exact_multiple():
    stream = io.BytesIO(_samples_bytes(np.arange(8)))
    blocks = list(iter_blocks(stream, 4))
    assert len(blocks) == 2
    assert blocks[1].tolist() == [4.0, 5.0, 6.0, 7.0]


def test_iter_blocks_drops_partial_sample():
    stream = io.BytesIO(_samples_bytes([1.5, 2.5]) + b"\x00\x01")
    blocks = list(iter_blocks(stream, 4))
    assert [b.tolist() for b in blocks] == [[1.5, 2.5]]


def test_iter_blocks_handles_short_reads():
    data = _samples_bytes(np.arange(6))
    blocks = list(iter_blocks(_TrickleStream(data, 3), 3))
    assert [b.tolist() for b in blocks] == [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]]


def test_iter_blocks_empty_stream():
    assert list(iter_blocks(io.BytesIO(b""), 4)) == []


def test_iter_blocks_rejects_bad_size():
    with pytest.raises(ValueError):
        list(iter_blocks(io.BytesIO(b""), 0))


@pytest.fixture
def calibration_file(tmp_path):
    path = tmp_path / "calibration.txt"
    path.write_text(CALIBRATION_TEXT)
    return path


def _tone_file(tmp_path, n_samples):
    t = np.arange(n_samples) / 48_000.0
    samples = 0.1 * np.sin(2 * np.pi * 1000 * t)
    path = tmp_path / "samples.raw"
    path.write_bytes(_samples_bytes(samples))
    return path


def test_main_prints_one_line_per_second(tmp_path, calibration_file, capsys):
    samples = _tone_file(tmp_path, 96_000)
    status = main(["--calibration", str(calibration_file), "--input", str(samples)])
    out = capsys.readouterr().out
    lines = [line for line in out.splitlines() if "dB(Z)" in line]
    assert status == 0
    assert len(lines) == 2
    assert all("dB(A)" in line and "dB(C)" in line for line in lines)


def test_main_reports_short_trailing_block(tmp_path, calibration_file, capsys):
    samples = _tone_file(tmp_path, 48_100)
    status = main(["--calibration", str(calibration_file), "--input", str(samples)])
    out = capsys.readouterr().out
    assert status == 0
    assert "got 100" in out


def test_main_missing_calibration(tmp_path, capsys):
    status = main(["--calibration", str(tmp_path / "absent.txt"), "--input", "x"])
    assert status == 1
    assert "calibration" in capsys.readouterr().err


def test_main_missing_input(tmp_path, calibration_file, capsys):
    status = main(
        ["--calibration", str(calibration_file), "--input", str(tmp_path / "none.raw")]
    )
    assert status == 1
    assert "Failed to connect" in capsys.readouterr().err


def test_main_writes_log_file(tmp_path, calibration_file):
    samples = _tone_file(tmp_path, 48_000)
    log_path = tmp_path / "meter.log"
    status = main(
        [
            "--calibration",
            str(calibration_file),
            "--input",
            str(samples),
            "--log-file",
            str(log_path),
        ]
    )
    assert status == 0
    assert "dB(Z)" in log_path.read_text()