"""Enumerate graphics adapters and classify their device kind."""

from __future__ import annotations

import re
import shlex
import sys

from ..models import DeviceKind, RawAdapterDescriptor
from . import _utils
from .base import BaseCollector

_SOFTWARE_MARKERS = (
    "llvmpipe", "softpipe", "lavapipe", "swiftshader",
    "basic render", "basic display", "basicrender", "software rasterizer",
)
_VIRTUAL_MARKERS = (
    "vmware", "virtualbox", "vbox", "qxl", "virtio", "hyper-v", "hyperv",
    "parallels", "cirrus", "bochs", "citrix", "virtual",
)
_EMBEDDED_MARKERS = ("tegra", "orin", "xavier", "mali", "adreno", "videocore", "apple")
_DISCRETE_MARKERS = (
    "nvidia", "geforce", "quadro", "tesla", "titan",
    "radeon rx", "radeon pro", "radeon hd", "radeon r9", "radeon r7", "firepro",
    "intel arc", "arc(tm)", "arc a", "arc b",
)
_INTEGRATED_MARKERS = (
    "intel", "iris", "uhd graphics", "integrated",
    "radeon(tm) graphics", "radeon graphics", "vega",
)
# AMD APU graphics named by model, e.g. "Radeon 680M" or "Radeon(TM) 780M"
_AMD_APU_RE = re.compile(r"radeon\s*(?:\(tm\)\s*)?\d{3}m\b")
_AMD_VENDOR_RE = re.compile(r"advanced micro devices|\bamd\b|\bati\b")

_LSPCI_DISPLAY_CLASSES = ("VGA compatible controller", "3D controller", "Display controller")
_MAC_BUS_KINDS = {
    "spdisplays_builtin":     DeviceKind.INTEGRATED,
    "spdisplays_pcie":        DeviceKind.DISCRETE,
    "spdisplays_thunderbolt": DeviceKind.DISCRETE,
}


def classify_adapter(name: str, vendor: str = "", hint: DeviceKind | None = None) -> DeviceKind:
    """Guess an adapter's :class:`DeviceKind` from its name and vendor.

    ``hint`` is a kind already reported by the platform (e.g. the macOS bus
    type); it wins over name matching except for software and virtual
    adapters, which are recognised by name first.
    """
    text = f"{vendor} {name}".lower()

    if any(m in text for m in _SOFTWARE_MARKERS):
        return DeviceKind.SOFTWARE_RASTERIZER
    if any(m in text for m in _VIRTUAL_MARKERS):
        return DeviceKind.VIRTUAL
    if hint is not None:
        return hint
    if any(m in text for m in _EMBEDDED_MARKERS):
        return DeviceKind.INTEGRATED
    if any(m in text for m in _DISCRETE_MARKERS):
        return DeviceKind.DISCRETE
    if _AMD_APU_RE.search(text) or any(m in text for m in _INTEGRATED_MARKERS):
        return DeviceKind.INTEGRATED
    # AMD parts that matched no discrete marker are APUs (Phoenix, Raphael, ...)
    if _AMD_VENDOR_RE.search(text):
        return DeviceKind.INTEGRATED
    return DeviceKind.UNKNOWN


def _short_vendor(vendor: str) -> str:
    m = re.search(r"\[([^\]]+)\]", vendor)
    if m:
        return m.group(1)
    for suffix in (" Corporation", ", Inc.", " Inc.", " Ltd.", " Co."):
        if vendor.endswith(suffix):
            return vendor[: -len(suffix)]
    return vendor


def _lspci_name(vendor: str, device: str) -> str:
    """Build 'NVIDIA GeForce RTX 3080' from 'NVIDIA Corporation', 'GA102 [GeForce RTX 3080]'."""
    m = re.search(r"\[([^\]]+)\]\s*$", device)
    model = m.group(1) if m else device
    short = _short_vendor(vendor)
    if not short or model.lower().startswith(short.lower()):
        return model
    return f"{short} {model}"


def parse_lspci(output: str) -> list[RawAdapterDescriptor]:
    """Parse ``lspci -mm`` output into display adapters, in bus order."""
    adapters = []
    for line in output.splitlines():
        try:
            fields = shlex.split(line)
        except ValueError:
            continue
        if len(fields) < 4 or fields[1] not in _LSPCI_DISPLAY_CLASSES:
            continue
        vendor, device = fields[2], fields[3]
        adapters.append(RawAdapterDescriptor(
            name=_lspci_name(vendor, device),
            device_kind=classify_adapter(device, vendor),
        ))
    return adapters


def parse_pciconf(output: str) -> list[RawAdapterDescriptor]:
    """Parse FreeBSD ``pciconf -lv`` output into display adapters, in bus order."""
    devices: list[dict[str, str]] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        if not line[0].isspace():
            devices.append({})
            continue
        key, sep, value = line.partition("=")
        if sep and devices:
            devices[-1][key.strip()] = value.strip().strip("'")

    adapters = []
    for dev in devices:
        if dev.get("class") != "display":
            continue
        vendor, device = dev.get("vendor", ""), dev.get("device", "")
        adapters.append(RawAdapterDescriptor(
            name=_lspci_name(vendor, device) or "unknown",
            device_kind=classify_adapter(device, vendor),
        ))
    return adapters


class GpuCollector(BaseCollector):
    name = "gpu"

    def _collect(self) -> dict:
        if sys.platform == "win32":
            adapters = self._get_windows()
        elif sys.platform == "darwin":
            adapters = self._get_macos()
        elif sys.platform.startswith("freebsd"):
            adapters = parse_pciconf(_utils.run_cmd(["pciconf", "-lv"]))
        else:
            adapters = parse_lspci(_utils.run_cmd(["lspci", "-mm"]))
        return {"adapters": adapters}

    def _get_windows(self) -> list[RawAdapterDescriptor]:
        items = _utils.powershell_json(
            "Get-CimInstance Win32_VideoController "
            "| Select-Object DeviceID,Name,AdapterCompatibility,PNPDeviceID"
        )
        adapters = []
        for item in items:
            name = (item.get("Name") or "").strip()
            vendor = (item.get("AdapterCompatibility") or "").strip()
            pnp = (item.get("PNPDeviceID") or "").strip()
            # DeviceID looks like "VideoController1"
            m = re.search(r"(\d+)$", str(item.get("DeviceID") or ""))
            adapters.append(RawAdapterDescriptor(
                name=name or pnp or "unknown",
                device_kind=classify_adapter(f"{name} {pnp}", vendor),
                index=int(m.group(1)) - 1 if m and int(m.group(1)) > 0 else None,
            ))
        return adapters

    def _get_macos(self) -> list[RawAdapterDescriptor]:
        data = _utils.run_json(["system_profiler", "SPDisplaysDataType", "-json"])
        if not isinstance(data, dict):
            return []
        adapters = []
        for d in data.get("SPDisplaysDataType", []):
            name = d.get("sppci_model") or d.get("_name") or "unknown"
            vendor = d.get("spdisplays_vendor") or ""
            adapters.append(RawAdapterDescriptor(
                name=name,
                device_kind=classify_adapter(name, vendor, hint=_MAC_BUS_KINDS.get(d.get("sppci_bus"))),
            ))
        return adapters
