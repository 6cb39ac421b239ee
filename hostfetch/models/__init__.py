"""Data models for hostfetch."""

from .schema import (
    CpuGroup,
    DeviceKind,
    GpuRecord,
    HostReport,
    RawAdapterDescriptor,
    RawCpuSample,
)

__all__ = [
    "CpuGroup",
    "DeviceKind",
    "GpuRecord",
    "HostReport",
    "RawAdapterDescriptor",
    "RawCpuSample",
]
