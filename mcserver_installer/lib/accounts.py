from __future__ import annotations

import logging
from typing import Callable

from .command import CmdResult

logger = logging.getLogger(__name__)

Runner = Callable[..., CmdResult]

LOGIN_SHELL = "/bin/bash"


def create_system_user(run: Runner, name: str, *, home: str) -> None:
    """System account with its own group and home at the servers' base dir."""

    run(["useradd", "-r", "-m", "-U", "-d", home, "-s", LOGIN_SHELL, name])
    logger.info("Created system user %s (home=%s)", name, home)


def chown_tree(run: Runner, path: str, *, user: str, group: str | None = None) -> None:
    run(["chown", "-R", f"{user}:{group or user}", path])
