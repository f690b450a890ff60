"""Reading microphone calibration files."""

from __future__ import annotations

import os
from typing import Iterable

from splmeter.types import MicCalibrationData


class CalibrationError(ValueError):
    """Raised when a calibration file cannot be understood."""


def _parse_number(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise CalibrationError(f"invalid number: {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise CalibrationError(f"invalid number: {text!r}") from exc


def _trim_suffix_repeated(text: str, suffix: str) -> str:
    while text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def extract_sensitivity(line: str) -> float:
    """Return the value of the ``Sens Factor`` field in a header line."""
    for part in line.split(","):
        if "Sens Factor" in part:
            pieces = part.split("=")
            if len(pieces) < 2:
                raise CalibrationError("Invalid sensitivity format")
            value = _trim_suffix_repeated(pieces[1].strip(), "dB")
            return _parse_number(value)
    raise CalibrationError("Sensitivity not found")


def parse_calibration_lines(lines: Iterable[str]) -> MicCalibrationData:
    """Parse a header line then ``frequency response_dB`` pairs.

    Responses are converted from dB to linear gain. Lines that do not
    hold exactly two fields are ignored.
    """
    iterator = iter(lines)
    try:
        header = next(iterator)
    except StopIteration:
        raise CalibrationError("File is empty") from None
    sensitivity = extract_sensitivity(header.rstrip("\r\n"))

    frequency: list[float] = []
    response: list[float] = []
    for line in iterator:
        parts = line.split()
        if len(parts) != 2:
            continue
        freq = _parse_number(parts[0])
        resp_db = _parse_number(parts[1])
        frequency.append(freq)
        response.append(10.0 ** (resp_db / 20.0))

    return MicCalibrationData(
        sensitivity=sensitivity, frequency=frequency, response=response
    )


def parse_calibration_file(path: str | os.PathLike[str]) -> MicCalibrationData:
    """Read calibration data from a text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_calibration_lines(handle)