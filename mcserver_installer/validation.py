from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

_RAM_RE = re.compile(r"^[0-9]+[MGmg]$")


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None


def accept(value: Any) -> ValidationResult:
    return ValidationResult(ok=True, value=value)


def reject(error: str) -> ValidationResult:
    return ValidationResult(ok=False, error=error)


def validate_text(raw: str) -> ValidationResult:
    return accept(raw)


def validate_ram(raw: str) -> ValidationResult:
    """JVM heap size such as 2G or 1024M."""
    if _RAM_RE.fullmatch(raw):
        return accept(raw)
    return reject("Invalid RAM format. Use something like 2G or 2048M.")


def validate_port(raw: str) -> ValidationResult:
    if not raw.isascii() or not raw.isdigit():
        return reject("Invalid port. Must be a number between 1 and 65535.")
    port = int(raw)
    if 0 < port < 65536:
        return accept(port)
    return reject("Invalid port. Must be a number between 1 and 65535.")


def validate_abs_path(raw: str) -> ValidationResult:
    """Absolute directory; commands, files and the unit must all agree on it."""
    if not raw.startswith("/"):
        return reject("Path must be absolute (start with /).")
    if any(part == ".." for part in raw.split("/")):
        return reject("Path must not contain '..'.")
    return accept(raw.rstrip("/") or "/")


def validate_server_name(raw: str) -> ValidationResult:
    """Used as a directory name and as the systemd unit suffix."""
    if not raw or raw in {".", ".."}:
        return reject("Server name must not be empty.")
    if "/" in raw or any(c.isspace() for c in raw):
        return reject("Server name must not contain '/' or whitespace.")
    return accept(raw)
