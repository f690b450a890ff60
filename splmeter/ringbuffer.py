"""A bounded sample queue shared between the capture callback and the meter."""

from __future__ import annotations

import threading
from collections import deque
from typing import Iterable


class SampleRing:
    """Fixed-capacity FIFO of samples; pushes beyond capacity are dropped."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._samples: deque[float] = deque()
        self._lock = threading.Lock()

    def push(self, samples: Iterable[float]) -> int:
        """Append samples while there is room; return how many were stored."""
        stored = 0
        with self._lock:
            for sample in samples:
                if len(self._samples) >= self.capacity:
                    continue
                self._samples.append(float(sample))
                stored += 1
        return stored

    def pop(self, count: int) -> list[float]:
        """Remove and return up to ``count`` of the oldest samples."""
        with self._lock:
            take = min(max(count, 0), len(self._samples))
            return [self._samples.popleft() for _ in range(take)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)


def create_input_ring(
    sample_rate: int, channels: int, latency_ms: float = 100.0
) -> SampleRing:
    """Create a ring holding one second plus latency, prefilled with silence."""
    latency_frames = (latency_ms / 1000.0) * sample_rate
    latency_samples = int(latency_frames) * channels
    ring = SampleRing(sample_rate + latency_samples)
    ring.push([0.0] * latency_samples)
    return ring