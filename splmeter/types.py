"""Calibration data and precomputed frequency weightings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


@dataclass
class MicCalibrationData:
    """Microphone calibration: sensitivity plus a linear frequency response."""

    sensitivity: float
    frequency: list[float] = field(default_factory=list)
    response: list[float] = field(default_factory=list)

    def interpolate(self, target_freqs: Iterable[float]) -> np.ndarray:
        """Linearly interpolate the response at ``target_freqs``.

        Points outside the calibrated range are extrapolated from the
        first or last segment. The frequencies are assumed to be ascending.
        """
        targets = np.asarray(list(target_freqs), dtype=np.float64)
        xs = np.asarray(self.frequency, dtype=np.float64)
        ys = np.asarray(self.response, dtype=np.float64)
        if xs.size != ys.size:
            raise ValueError("frequency and response must have the same length")
        if xs.size == 0:
            return np.zeros_like(targets)
        if xs.size == 1:
            return np.full_like(targets, ys[0])

        result = np.interp(targets, xs, ys)

        below = targets < xs[0]
        if below.any():
            slope = (ys[1] - ys[0]) / (xs[1] - xs[0])
            result[below] = ys[0] + slope * (targets[below] - xs[0])

        above = targets > xs[-1]
        if above.any():
            slope = (ys[-1] - ys[-2]) / (xs[-1] - xs[-2])
            result[above] = ys[-1] + slope * (targets[above] - xs[-1])

        return result


@dataclass(frozen=True, eq=False)
class Weightings:
    """Per-bin gains for A, C and microphone calibration weighting."""

    a_weighting: np.ndarray
    c_weighting: np.ndarray
    cal_weighting: np.ndarray