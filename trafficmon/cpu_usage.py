"""Whole-system CPU usage, sampled between calls."""

from __future__ import annotations

import psutil

_EXCLUDED_FIELDS = ("guest", "guest_nice")
_IDLE_FIELDS = ("idle", "iowait")


def _sample_times() -> tuple[float, float]:
    """Idle and total CPU time since boot."""
    fields = psutil.cpu_times()._asdict()
    total = sum(value for name, value in fields.items() if name not in _EXCLUDED_FIELDS)
    idle = sum(fields.get(name, 0.0) for name in _IDLE_FIELDS)
    return idle, total


class CpuUsage:
    """Reports CPU usage in percent, either from cumulative CPU times or from a counter."""

    def __init__(self):
        self._use_get_system_times = True
        self._first_get_cpu_utility = True
        self._prev_idle = 0.0
        self._prev_total = 0.0

    def set_use_cpu_times(self, use_get_system_times: bool) -> None:
        """Choose the CPU-times method (True) or the counter method (False)."""
        if self._use_get_system_times != use_get_system_times:
            self._use_get_system_times = use_get_system_times
            self._first_get_cpu_utility = True

    def get_cpu_usage(self) -> int:
        """CPU usage in percent since the previous call."""
        if self._use_get_system_times:
            return self._usage_by_times()
        return self._usage_by_counter()

    def _usage_by_times(self) -> int:
        idle, total = _sample_times()
        d_idle = idle - self._prev_idle
        d_total = total - self._prev_total
        self._prev_idle = idle
        self._prev_total = total
        if d_total == 0:
            return 0
        return int(abs((d_total - d_idle) * 100 / d_total))

    def _usage_by_counter(self) -> int:
        percent = psutil.cpu_percent(interval=None)
        if self._first_get_cpu_utility:
            self._first_get_cpu_utility = False
            return 0
        return min(int(percent), 100)