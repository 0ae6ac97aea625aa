from __future__ import annotations

import logging
from typing import Callable

from .command import CmdResult

logger = logging.getLogger(__name__)

Runner = Callable[..., CmdResult]

FIREWALL_TOOL = "ufw"


def ufw_allow_tcp(run: Runner, port: int) -> bool:
    """Open a TCP port. Returns False instead of raising; the rule is advisory."""

    r = run([FIREWALL_TOOL, "allow", f"{port}/tcp"], check=False)
    if r.returncode != 0:
        logger.warning("ufw allow %s/tcp failed (%s): %s", port, r.returncode, (r.stderr or "").strip())
        return False
    return True
