"""Collect user, host, OS, kernel and board-serial identity."""

from __future__ import annotations

import getpass
import os
import platform
import socket
import sys

from ..logging_setup import get_logger
from . import _utils
from .base import BaseCollector

logger = get_logger()

# Strings firmware vendors leave in the serial field when none was programmed.
_SERIAL_PLACEHOLDERS = {
    "",
    "none",
    "0",
    "default string",
    "not specified",
    "not applicable",
    "system serial number",
    "to be filled by o.e.m.",
}


def _clean_serial(value) -> str | None:
    sn = str(value or "").strip()
    if sn.lower() in _SERIAL_PLACEHOLDERS:
        return None
    return sn


class IdentityCollector(BaseCollector):
    name = "identity"

    def _collect(self) -> dict:
        return {
            "username": self._get_username(),
            "hostname": self._get_hostname(),
            "os_name":  self._get_os_name(),
            "kernel":   self._get_kernel(),
        }

    def _get_username(self) -> str:
        try:
            return getpass.getuser()
        except (KeyError, OSError, ImportError):
            return os.environ.get("USERNAME") or os.environ.get("USER", "unknown")

    def _get_hostname(self) -> str | None:
        try:
            return socket.gethostname() or None
        except OSError as exc:
            logger.debug("hostname lookup failed: %s", exc)
            return None

    def _get_os_name(self) -> str:
        if sys.platform == "darwin":
            version = _utils.run_cmd(["sw_vers", "-productVersion"]) or platform.mac_ver()[0]
            return f"macOS {version}".strip()
        if sys.platform == "win32":
            return f"Windows {platform.release()}".strip()
        return self._get_os_release() or platform.system() or "unknown"

    def _get_os_release(self) -> str | None:
        """Return PRETTY_NAME (or NAME) from os-release, if present."""
        for path in ("/etc/os-release", "/usr/lib/os-release"):
            fields = {}
            for line in _utils.read_text(path).splitlines():
                key, sep, value = line.partition("=")
                if sep:
                    fields[key.strip()] = value.strip().strip("\"'")
            name = fields.get("PRETTY_NAME") or fields.get("NAME")
            if name:
                return name
        return None

    def _get_kernel(self) -> str:
        uname = platform.uname()
        if sys.platform == "win32":
            return f"{uname.system} {uname.release} (build {uname.version})"
        if sys.platform == "darwin":
            return f"Darwin {uname.release}"
        return f"{uname.system} {uname.release}".strip()


class SerialCollector(BaseCollector):
    name = "serial"

    def _collect(self) -> dict:
        if sys.platform == "win32":
            serial = self._get_windows()
        elif sys.platform == "darwin":
            serial = self._get_macos()
        elif sys.platform.startswith("freebsd"):
            serial = self._get_kenv()
        else:
            serial = self._get_dmi()
        if serial is None:
            logger.debug("board serial number not available")
        return {"serial": serial}

    def _get_dmi(self) -> str | None:
        for path in ("/sys/class/dmi/id/board_serial", "/sys/class/dmi/id/product_serial"):
            serial = _clean_serial(_utils.read_text(path))
            if serial:
                return serial
        return None

    def _get_kenv(self) -> str | None:
        for key in ("smbios.planar.serial", "smbios.system.serial"):
            serial = _clean_serial(_utils.run_cmd(["kenv", "-q", key]))
            if serial:
                return serial
        return None

    def _get_macos(self) -> str | None:
        data = _utils.run_json(["system_profiler", "SPHardwareDataType", "-json"])
        if not isinstance(data, dict):
            return None
        hw = (data.get("SPHardwareDataType") or [{}])[0]
        return _clean_serial(hw.get("serial_number"))

    def _get_windows(self) -> str | None:
        items = _utils.powershell_json(
            "Get-CimInstance Win32_BaseBoard | Select-Object SerialNumber"
        )
        return _clean_serial(items[0].get("SerialNumber")) if items else None
