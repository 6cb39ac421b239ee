"""Subprocess and file helpers shared by the collectors."""

import json
import subprocess
import sys
from pathlib import Path

_CREATE_NO_WINDOW = 0x08000000


def _decode(raw: bytes) -> str:
    """Decode subprocess bytes with UTF-8; fall back to cp1252 then replace."""
    for enc in ("utf-8-sig", "utf-8", "cp1252"):
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    return raw.decode("utf-8", errors="replace")


def run_cmd(cmd: list[str], timeout: int = 15) -> str:
    """Run a command and return stdout as a string.

    Never raises — returns '' on any failure.
    """
    try:
        kwargs: dict = {
            "args": cmd,
            "capture_output": True,
            "timeout": timeout,
        }
        if sys.platform == "win32":
            kwargs["creationflags"] = _CREATE_NO_WINDOW
        result = subprocess.run(**kwargs)
        if result.returncode != 0:
            return ""
        return _decode(result.stdout).strip()
    except (OSError, subprocess.SubprocessError):
        return ""


def run_json(cmd: list[str], timeout: int = 30) -> dict | list:
    """Run a command, parse stdout as JSON.

    Returns {} on any failure.
    """
    raw = run_cmd(cmd, timeout=timeout)
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        return {}


def run_powershell(cmd: str, timeout: int = 30) -> str:
    """Run a PowerShell command with UTF-8 output and return stdout ('' on failure)."""
    full_cmd = "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8; " + cmd
    return run_cmd(
        ["powershell", "-NonInteractive", "-ExecutionPolicy", "Bypass", "-Command", full_cmd],
        timeout=timeout,
    )


def powershell_json(cmd: str, timeout: int = 30) -> list[dict]:
    """Run ``cmd | ConvertTo-Json`` and always return a list of objects."""
    raw = run_powershell(f"{cmd} | ConvertTo-Json", timeout=timeout)
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError:
        return []
    if isinstance(data, dict):
        return [data]
    return [d for d in data if isinstance(d, dict)] if isinstance(data, list) else []


def read_text(path: str) -> str:
    """Return the contents of a small system file, or '' if unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ""
