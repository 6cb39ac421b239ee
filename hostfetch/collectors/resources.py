"""Collect per-core CPU readings, memory and uptime via psutil."""

from __future__ import annotations

import platform
import sys
import time

import psutil

from ..models import RawCpuSample
from . import _utils
from .base import BaseCollector

# Minimum window between the two utilisation readings; anything shorter makes
# psutil's per-CPU percentages meaningless.
SETTLE_DELAY_S = 0.2


def parse_proc_cpuinfo(text: str) -> list[str]:
    """Return one brand string per ``processor`` block of /proc/cpuinfo.

    Uses ``model name`` when present and falls back to the ARM-style
    ``Hardware`` / ``Processor`` fields.
    """
    brands: list[str] = []
    fallback = ""
    current: str | None = None
    seen_processor = False

    for line in text.splitlines() + [""]:
        if not line.strip():
            if seen_processor:
                brands.append(current if current is not None else "")
            seen_processor = False
            current = None
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value[1:] if value.startswith(" ") else value
        if key == "processor":
            seen_processor = True
        elif key == "model name":
            current = value
        elif key in ("Hardware", "Processor") and not fallback:
            fallback = value

    return [b or fallback for b in brands]


class ResourceCollector(BaseCollector):
    name = "resources"

    def __init__(self, settle_delay: float = SETTLE_DELAY_S) -> None:
        self.settle_delay = settle_delay

    def _collect(self) -> dict:
        vm = psutil.virtual_memory()
        return {
            "cpu_samples":        self._get_cpu_samples(),
            # "used" as total minus available, the figure most tools report
            "memory_used_bytes":  max(0, vm.total - vm.available),
            "memory_total_bytes": vm.total,
            "uptime_seconds":     self._get_uptime(),
        }

    # ── CPU ──────────────────────────────────────────────────────────────────

    def _get_cpu_samples(self) -> list[RawCpuSample]:
        psutil.cpu_percent(interval=None, percpu=True)
        time.sleep(self.settle_delay)
        usage = psutil.cpu_percent(interval=None, percpu=True)

        count = len(usage)
        freqs = self._get_frequencies(count)
        brands = self._get_brands(count)
        return [
            RawCpuSample(brand_name=brands[i], usage_percent=usage[i], frequency_mhz=freqs[i])
            for i in range(count)
        ]

    def _get_frequencies(self, count: int) -> list[float]:
        try:
            freqs = psutil.cpu_freq(percpu=True) or []
        except (NotImplementedError, OSError):
            freqs = []
        if len(freqs) == count:
            return [float(f.current or 0.0) for f in freqs]
        if freqs:
            return [float(freqs[0].current or 0.0)] * count
        return [0.0] * count

    def _get_brands(self, count: int) -> list[str]:
        brands: list[str] = []
        if sys.platform.startswith("linux"):
            brands = parse_proc_cpuinfo(_utils.read_text("/proc/cpuinfo"))
        elif sys.platform == "darwin":
            brand = _utils.run_cmd(["sysctl", "-n", "machdep.cpu.brand_string"])
            brands = [brand] if brand else []
        elif sys.platform.startswith("freebsd"):
            brand = _utils.run_cmd(["sysctl", "-n", "hw.model"])
            brands = [brand] if brand else []
        elif sys.platform == "win32":
            items = _utils.powershell_json("Get-CimInstance Win32_Processor | Select-Object Name")
            brands = [str(items[0].get("Name") or "")] if items else []

        if len(brands) == count:
            return brands
        single = brands[0] if brands else platform.processor()
        return [single] * count

    # ── Uptime ───────────────────────────────────────────────────────────────

    def _get_uptime(self) -> int:
        return max(0, int(time.time() - psutil.boot_time()))
