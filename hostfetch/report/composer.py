"""Compose the report lines and lay them out beside the logo."""

from __future__ import annotations

from typing import Sequence

from ..models import HostReport
from .duration import format_uptime

LOGO_WIDTH = 32
LOGO: tuple[str, ...] = (
    "       :#.                      ",
    "       :#-:****************+    ",
    "         -::::::::.......:::    ",
    "   .#*               -**=:.     ",
    "    #-::            =%%=:.      ",
    "     --::.        :*%#::        ",
    "       -:::.    .=%%-:          ",
    "         :::=######:.           ",
    "          .::::::..             ",
)


def compose(report: HostReport) -> list[str]:
    """Return the report as an ordered list of text lines (no logo)."""
    lines = [
        f"{report.username}@{report.hostname}",
        "-" * (len(report.username) + len(report.hostname) + 1),
        f"OS:        {report.os_name}",
        f"Serial:    {report.serial_number}",
        f"Kernel:    {report.kernel_version}",
        f"Uptime:    {format_uptime(report.uptime_seconds)}",
    ]
    for brand, group in report.cpu_groups.items():
        lines.append(
            f"CPU:       {brand} - {group.num_cores} cores, "
            f"{group.avg_usage:.2f}% avg, {group.max_frequency_mhz:.2f} MHz (max)"
        )
    for gpu in sorted(report.gpus, key=lambda g: g.device_index):
        lines.append(f"GPU {gpu.device_index:.>3}:   {gpu.display_name}")
    lines.append(f"Memory:    {report.memory_used_mb}/{report.memory_total_mb} MB used")
    return lines


def pair_with_logo(
    lines: Sequence[str],
    logo: Sequence[str] = LOGO,
    width: int = LOGO_WIDTH,
) -> list[str]:
    """Prefix each line with its logo row.

    Lines past the bottom of the logo are indented by ``width`` spaces; logo
    rows past the last line are emitted on their own.
    """
    rows = []
    for idx, line in enumerate(lines):
        prefix = logo[idx] if idx < len(logo) else " " * width
        rows.append(prefix + line)
    rows.extend(logo[len(lines):])
    return rows


def render(report: HostReport) -> str:
    """Return the full terminal output, framed by a blank line on each side."""
    rows = pair_with_logo(compose(report))
    return "\n".join(["", *rows, ""]) + "\n"
