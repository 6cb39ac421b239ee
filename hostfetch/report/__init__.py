"""Aggregation, normalisation and rendering of collected host facts."""

from .composer import compose, pair_with_logo, render
from .cpu import aggregate
from .duration import format_uptime
from .gpu import enumerate_gpus

__all__ = [
    "aggregate",
    "compose",
    "enumerate_gpus",
    "format_uptime",
    "pair_with_logo",
    "render",
]
