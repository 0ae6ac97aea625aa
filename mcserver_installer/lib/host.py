from __future__ import annotations

import os
import pwd
import shutil
from typing import Protocol


class Host(Protocol):
    """Live-system probes. Every "does it already exist" question goes through here."""

    def is_root(self) -> bool:
        ...

    def which(self, name: str) -> str | None:
        ...

    def user_exists(self, name: str) -> bool:
        ...


class SystemHost:
    def is_root(self) -> bool:
        return os.geteuid() == 0

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def user_exists(self, name: str) -> bool:
        try:
            pwd.getpwnam(name)
        except KeyError:
            return False
        return True
