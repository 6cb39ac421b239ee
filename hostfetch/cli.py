"""Command-line interface and orchestration for hostfetch."""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .collectors import (
    GpuCollector,
    IdentityCollector,
    ResourceCollector,
    SerialCollector,
    platform_supported,
)
from .logging_setup import configure_logging, get_logger
from .models import HostReport
from .report import aggregate, enumerate_gpus, render

HOSTNAME_FALLBACK = "unknown"
SERIAL_FALLBACK = "xxxxxxxxxx"
UNSUPPORTED_MESSAGE = "System not supported. Aborting."
RESOURCES_MESSAGE = "Could not read CPU and memory information. Aborting."

# Collectors whose failure is recovered by a fallback value.
_OPTIONAL_COLLECTORS = ("serial",)

_BYTES_PER_MB = 1024 * 1024


class HostQueryError(RuntimeError):
    """Raised when a required host fact cannot be read."""


class UnsupportedPlatformError(HostQueryError):
    """Raised when the host-query layer cannot read this platform."""


# ── argument parsing ──────────────────────────────────────────────────────────

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hostfetch",
        description="Print a one-shot summary of this machine next to a logo.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=False,
        help="Log collector diagnostics to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"hostfetch {__version__}",
    )
    return parser.parse_args(argv)


# ── report assembly ───────────────────────────────────────────────────────────

def _assemble_report(identity: dict, serial: dict, resources: dict, gpu: dict) -> HostReport:
    """Resolve optional facts to their fallbacks and summarise CPUs and GPUs."""
    return HostReport(
        username=identity.get("username") or "unknown",
        hostname=identity.get("hostname") or HOSTNAME_FALLBACK,
        os_name=identity.get("os_name") or "unknown",
        serial_number=serial.get("serial") or SERIAL_FALLBACK,
        kernel_version=identity.get("kernel") or "unknown",
        uptime_seconds=resources.get("uptime_seconds", 0),
        cpu_groups=aggregate(resources.get("cpu_samples", [])),
        gpus=tuple(enumerate_gpus(gpu.get("adapters", []))),
        memory_used_mb=resources.get("memory_used_bytes", 0) // _BYTES_PER_MB,
        memory_total_mb=resources.get("memory_total_bytes", 0) // _BYTES_PER_MB,
    )


def collect_host_report(resource_collector: ResourceCollector | None = None) -> HostReport:
    """Run every collector once and build the report.

    Raises:
        UnsupportedPlatformError: if this platform cannot be queried.
        HostQueryError: if CPU and memory facts could not be read.
    """
    if not platform_supported():
        raise UnsupportedPlatformError(sys.platform)

    logger = get_logger()
    results = {
        "identity":  IdentityCollector().collect(),
        "serial":    SerialCollector().collect(),
        "resources": (resource_collector or ResourceCollector()).collect(),
        "gpu":       GpuCollector().collect(),
    }
    for label, result in results.items():
        level = logging.DEBUG if label in _OPTIONAL_COLLECTORS else logging.WARNING
        for err in result.errors:
            logger.log(level, "collector %s failed: %s", label, err)

    if not results["resources"].ok:
        raise HostQueryError("; ".join(results["resources"].errors))

    return _assemble_report(
        identity=results["identity"].data,
        serial=results["serial"].data,
        resources=results["resources"].data,
        gpu=results["gpu"].data,
    )


# ── main entry point ──────────────────────────────────────────────────────────

def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        report = collect_host_report()
    except UnsupportedPlatformError as exc:
        get_logger().debug("unsupported platform: %s", exc)
        print(UNSUPPORTED_MESSAGE)
        return 1
    except HostQueryError as exc:
        get_logger().error("host query failed: %s", exc)
        print(RESOURCES_MESSAGE)
        return 1

    sys.stdout.write(render(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
