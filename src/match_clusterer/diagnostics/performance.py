"""
Run timing and memory monitoring.
Author: Rowel Facunla
"""

import time
from dataclasses import dataclass, asdict
from typing import Dict, Optional

import psutil


@dataclass
class RunMetrics:
    """Performance metrics container."""
    start_time: float
    end_time: Optional[float] = None
    peak_memory_mb: float = 0.0

    @property
    def total_time(self) -> float:
        """Total execution time in seconds."""
        if self.end_time is None:
            return 0.0
        return self.end_time - self.start_time


class RunMonitor:
    """
    Tracks wall time and peak resident memory of a run.

    Memory is sampled on demand (once per block) rather than from a
    background thread, since the run is a single sequential pass.
    """

    def __init__(self):
        self._process = psutil.Process()
        self.metrics = RunMetrics(start_time=time.time())

    def memory_usage_mb(self) -> float:
        """Current memory usage in MB."""
        return self._process.memory_info().rss / (1024 * 1024)

    def start(self):
        self.metrics = RunMetrics(start_time=time.time())
        self.sample()

    def sample(self):
        mem = self.memory_usage_mb()
        if mem > self.metrics.peak_memory_mb:
            self.metrics.peak_memory_mb = mem

    def stop(self):
        self.sample()
        self.metrics.end_time = time.time()

    def get_report(self) -> Dict:
        report = asdict(self.metrics)
        report['total_time_seconds'] = self.metrics.total_time
        return report


__all__ = ['RunMetrics', 'RunMonitor']
