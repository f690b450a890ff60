"""Spectral weighting and equivalent sound level computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from splmeter.types import Weightings

BLOCK_SAMPLES = 48_000
SENSITIVITY_DB = -1.359
SPECTRUM_SCALE = 1.414
REFERENCE_PRESSURE = 20e-6
LEVEL_OFFSET_DB = 33.6


class TooFewSamplesError(ValueError):
    """Raised when a block does not hold exactly one second of samples."""


@dataclass(frozen=True)
class SoundLevels:
    """Equivalent levels in dB for Z, A and C weighting."""

    z: float
    a: float
    c: float


def to_freq_domain(samples: Iterable[float]) -> np.ndarray:
    """Zero-pad to twice the length, FFT, and keep the first half, scaled."""
    data = np.asarray(list(samples) if not isinstance(samples, np.ndarray) else samples,
                      dtype=np.float64)
    original_len = data.size
    padded = np.concatenate([data, np.zeros(original_len)])
    spectrum = np.fft.fft(padded)[:original_len]
    return spectrum * SPECTRUM_SCALE


def to_time_domain(spectrum: Iterable[complex]) -> np.ndarray:
    """Inverse FFT normalised by length, returning the real part."""
    data = np.asarray(spectrum, dtype=np.complex128)
    if data.size == 0:
        return np.zeros(0)
    return np.fft.ifft(data).real


def apply_weighting(spectrum: Iterable[complex], weighting: Iterable[float]) -> np.ndarray:
    """Multiply each bin and its mirror bin by the matching gain.

    Bin 0 and the bin at half the spectrum length are scaled once only.
    """
    result = np.array(spectrum, dtype=np.complex128)
    gains = np.asarray(weighting, dtype=np.float64)
    fft_size = result.size
    if gains.size > fft_size:
        raise ValueError("Weighting length exceeds FFT size")

    result[: gains.size] *= gains
    indices = np.arange(1, gains.size)
    indices = indices[indices != fft_size // 2]
    result[fft_size - indices] *= gains[indices]
    return result


def apply_hamming_window(samples: Iterable[float]) -> np.ndarray:
    """Return the samples multiplied by a Hamming window."""
    data = np.asarray(samples, dtype=np.float64)
    return data * np.hamming(data.size)


def calculate_leq(samples: Iterable[float]) -> float:
    """Equivalent continuous sound level of the samples in dB."""
    data = np.asarray(samples, dtype=np.float64)
    if data.size == 0:
        raise ValueError("cannot compute a level from no samples")
    rms_pressure = np.sqrt(np.mean(data * data))
    return float(20.0 * np.log10(rms_pressure / REFERENCE_PRESSURE) + LEVEL_OFFSET_DB)


def process_raw_data(samples: Iterable[float], weightings: Weightings) -> SoundLevels:
    """Compute Z, A and C weighted levels for one second of samples."""
    data = np.asarray(samples, dtype=np.float64)
    if data.size != BLOCK_SAMPLES:
        raise TooFewSamplesError(
            f"expected {BLOCK_SAMPLES} samples, got {data.size}"
        )

    raw_spectrum = to_freq_domain(data)
    cal_z = apply_weighting(raw_spectrum, weightings.cal_weighting)
    cal_a = apply_weighting(cal_z, weightings.a_weighting)
    cal_c = apply_weighting(cal_z, weightings.c_weighting)

    return SoundLevels(
        z=calculate_leq(to_time_domain(cal_z)) + SENSITIVITY_DB,
        a=calculate_leq(to_time_domain(cal_a)),
        c=calculate_leq(to_time_domain(cal_c)),
    )