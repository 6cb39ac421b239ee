"""hostfetch: one-shot host information reporter."""

__version__ = "1.0.0"
