"""Command-line sound level meter reading float32 samples from a stream."""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from datetime import datetime, timezone
from typing import BinaryIO, Iterator

import numpy as np

from splmeter.calibration import CalibrationError, parse_calibration_file
from splmeter.dsp import BLOCK_SAMPLES, TooFewSamplesError, process_raw_data
from splmeter.weightings import generate_weightings

SAMPLE_RATE = 48_000.0
DEFAULT_CALIBRATION = "./calibration_data/calibration.txt"
_SAMPLE_BYTES = 4

logger = logging.getLogger("splmeter")


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    buffer = bytearray()
    while len(buffer) < size:
        data = stream.read(size - len(buffer))
        if not data:
            break
        buffer.extend(data)
    return bytes(buffer)


def iter_blocks(stream: BinaryIO, block_size: int) -> Iterator[np.ndarray]:
    """Yield blocks of little-endian float32 samples read from ``stream``.

    Every block holds ``block_size`` samples except possibly the last,
    which holds whatever remained. Trailing bytes short of a sample are dropped.
    """
    if block_size < 1:
        raise ValueError("block_size must be positive")
    wanted = block_size * _SAMPLE_BYTES
    while True:
        chunk = _read_up_to(stream, wanted)
        usable = len(chunk) - len(chunk) % _SAMPLE_BYTES
        if usable == 0:
            return
        yield np.frombuffer(chunk[:usable], dtype="<f4").astype(np.float64)
        if len(chunk) < wanted:
            return


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splmeter",
        description="Sound level meter for 48 kHz mono float32 sample streams.",
    )
    parser.add_argument(
        "--calibration",
        default=DEFAULT_CALIBRATION,
        help="microphone calibration file",
    )
    parser.add_argument(
        "--input",
        default="-",
        help="raw little-endian float32 samples, '-' for standard input",
    )
    parser.add_argument("--log-file", default=None, help="append levels to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the meter; return the process exit status."""
    args = _build_parser().parse_args(argv)

    if args.log_file:
        handler = logging.FileHandler(args.log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    logger.info("Noisy USB Sound Level Meter")

    try:
        calibration = parse_calibration_file(args.calibration)
    except (OSError, CalibrationError) as exc:
        print(f"Failed to read calibration data: {exc}", file=sys.stderr)
        return 1

    weightings = generate_weightings(int(SAMPLE_RATE * 2), SAMPLE_RATE, calibration)

    with contextlib.ExitStack() as stack:
        if args.input == "-":
            stream = sys.stdin.buffer
        else:
            try:
                stream = stack.enter_context(open(args.input, "rb"))
            except OSError:
                print("Failed to connect to the audio device.", file=sys.stderr)
                return 1

        for block in iter_blocks(stream, BLOCK_SAMPLES):
            now = datetime.now(timezone.utc)
            try:
                levels = process_raw_data(block, weightings)
            except TooFewSamplesError as exc:
                print(exc)
                continue
            logger.info("%s dB(Z) | %s dB(A) | %s dB(C)|", levels.z, levels.a, levels.c)
            print(f"{now.isoformat()} : {levels.z} dB(Z) | {levels.a} dB(A) | {levels.c} dB(C)| ")
    return 0