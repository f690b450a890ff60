"""Per-bin frequency weighting gains for A, C and calibration curves."""

from __future__ import annotations

import numpy as np

from splmeter.types import MicCalibrationData, Weightings

_F1 = 20.6
_F2 = 107.7
_F3 = 737.9
_F4 = 12200.0
_A_OFFSET_DB = 2.0


def _bin_frequencies(fft_size: int, sample_rate: float) -> np.ndarray:
    bin_count = fft_size // 2
    if bin_count < 2:
        raise ValueError("fft_size must be at least 4")
    nyquist = sample_rate / 2.0
    return np.arange(bin_count, dtype=np.float64) * nyquist / (bin_count - 1)


def a_weighting_gains(fft_size: int, sample_rate: float) -> np.ndarray:
    """Linear A-weighting gains for ``fft_size // 2`` bins spanning 0..Nyquist."""
    f2 = _bin_frequencies(fft_size, sample_rate) ** 2
    ra_num = _F4**2 * f2 * f2
    ra_den = (
        (f2 + _F1**2)
        * (f2 + _F4**2)
        * np.sqrt((f2 + _F2**2) * (f2 + _F3**2))
    )
    return ra_num / ra_den * 10.0 ** (_A_OFFSET_DB / 20.0)


def c_weighting_gains(fft_size: int, sample_rate: float) -> np.ndarray:
    """Linear C-weighting gains (no normalisation offset)."""
    f2 = _bin_frequencies(fft_size, sample_rate) ** 2
    return (_F4**2 * f2) / ((f2 + _F1**2) * (f2 + _F4**2))


def cal_weighting_gains(
    fft_size: int, sample_rate: float, mic_cal_data: MicCalibrationData
) -> np.ndarray:
    """Calibration gains interpolated at each positive-frequency bin."""
    num_bins = fft_size // 2
    delta_f = sample_rate / fft_size
    targets = np.arange(num_bins, dtype=np.float64) * delta_f + 0.5
    return mic_cal_data.interpolate(targets)


def generate_weightings(
    fft_size: int, sample_rate: float, mic_cal_data: MicCalibrationData
) -> Weightings:
    """Build all weighting curves for the given FFT geometry."""
    return Weightings(
        a_weighting=a_weighting_gains(fft_size, sample_rate),
        c_weighting=c_weighting_gains(fft_size, sample_rate),
        cal_weighting=cal_weighting_gains(fft_size, sample_rate, mic_cal_data),
    )