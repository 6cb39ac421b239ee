"""Filter and label graphics adapters for the report."""

from __future__ import annotations

from typing import Iterable

from ..models import GpuRecord, RawAdapterDescriptor


def enumerate_gpus(adapters: Iterable[RawAdapterDescriptor]) -> list[GpuRecord]:
    """Return reportable GPUs ordered by their enumeration index.

    Software rasterizers and adapters of unknown kind are dropped. Retained
    adapters keep their original position as ``device_index``, so the
    indices may have gaps. Backend-assigned indices are used instead only
    when every adapter carries one; a partial set would collide with
    positions.
    """
    adapters = list(adapters)
    explicit = bool(adapters) and all(a.index is not None for a in adapters)

    records = [
        GpuRecord(
            device_index=adapter.index if explicit else idx,
            display_name=f"{adapter.name} ({adapter.device_kind.label})",
        )
        for idx, adapter in enumerate(adapters)
        if adapter.device_kind.reportable
    ]
    records.sort(key=lambda r: r.device_index)
    return records
