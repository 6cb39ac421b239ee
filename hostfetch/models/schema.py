"""Pydantic v2 schema definitions for hostfetch."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── raw facts from the host ───────────────────────────────────────────────────

class RawCpuSample(_Frozen):
    """One logical core as read from the host."""

    brand_name: str
    usage_percent: float = 0.0
    frequency_mhz: float = 0.0


class DeviceKind(str, Enum):
    INTEGRATED = "Integrated"
    DISCRETE = "Discrete"
    VIRTUAL = "Virtual"
    SOFTWARE_RASTERIZER = "SoftwareRasterizer"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]

    @property
    def reportable(self) -> bool:
        return self not in (DeviceKind.SOFTWARE_RASTERIZER, DeviceKind.UNKNOWN)


_KIND_LABELS = {
    DeviceKind.INTEGRATED:          "Integrated GPU",
    DeviceKind.DISCRETE:            "Discrete GPU",
    DeviceKind.VIRTUAL:             "Virtual GPU",
    DeviceKind.SOFTWARE_RASTERIZER: "Software Rasterizer",
    DeviceKind.UNKNOWN:             "unknown gpu type",
}


class RawAdapterDescriptor(_Frozen):
    name: str
    device_kind: DeviceKind = DeviceKind.UNKNOWN
    # Position assigned by the graphics backend; None means the adapter's
    # position in the enumerated sequence.
    index: Optional[int] = Field(default=None, ge=0)


# ── summarised facts ──────────────────────────────────────────────────────────

class CpuGroup(_Frozen):
    num_cores: int = Field(ge=1)
    avg_usage: float
    max_frequency_mhz: float


class GpuRecord(_Frozen):
    device_index: int = Field(ge=0)
    display_name: str


class HostReport(_Frozen):
    username: str
    hostname: str
    os_name: str
    serial_number: str
    kernel_version: str
    uptime_seconds: int = Field(default=0, ge=0)
    cpu_groups: dict[str, CpuGroup] = {}
    gpus: tuple[GpuRecord, ...] = ()
    memory_used_mb: int = Field(default=0, ge=0)
    memory_total_mb: int = Field(default=0, ge=0)
