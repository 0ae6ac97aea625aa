from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from .command import CmdResult

logger = logging.getLogger(__name__)

Runner = Callable[..., CmdResult]

JAVA_PACKAGE = "openjdk-21-jre-headless"
DOWNLOAD_TOOL_PACKAGE = "curl"


@dataclass(frozen=True)
class PackageRequest:
    packages: Sequence[str]
    update_first: bool = False


def apt_update(run: Runner) -> None:
    run(["apt-get", "update"])


def apt_upgrade(run: Runner) -> None:
    run(["apt-get", "upgrade", "-y"])


def apt_install(run: Runner, packages: Sequence[str]) -> None:
    if not packages:
        return
    run(["apt-get", "install", "-y", *packages])


def apply_request(run: Runner, req: PackageRequest) -> None:
    if req.update_first:
        apt_update(run)
        apt_upgrade(run)
    apt_install(run, req.packages)
    logger.info("Installed packages: %s", ", ".join(req.packages))
