"""Group per-core CPU samples by processor model."""

from __future__ import annotations

from typing import Iterable

from ..models import CpuGroup, RawCpuSample


def aggregate(samples: Iterable[RawCpuSample]) -> dict[str, CpuGroup]:
    """Fold logical-core samples into one :class:`CpuGroup` per brand string.

    Brands are compared exactly as reported: no trimming or case folding, so
    ``"Model X"`` and ``"model x"`` end up in separate groups.
    """
    # brand -> [cores, usage sum, max frequency]
    totals: dict[str, list] = {}
    for sample in samples:
        entry = totals.setdefault(sample.brand_name, [0, 0.0, 0.0])
        entry[0] += 1
        entry[1] += sample.usage_percent
        if sample.frequency_mhz > entry[2]:
            entry[2] = sample.frequency_mhz

    return {
        brand: CpuGroup(
            num_cores=cores,
            avg_usage=usage_sum / cores,
            max_frequency_mhz=max_freq,
        )
        for brand, (cores, usage_sum, max_freq) in totals.items()
    }
