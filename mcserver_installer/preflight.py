from __future__ import annotations

import logging

from .errors import PreconditionError
from .lib.host import Host

logger = logging.getLogger(__name__)

PACKAGE_MANAGER = "apt-get"
SERVICE_MANAGER = "systemctl"


def check_preconditions(host: Host) -> None:
    """Refuse to start unless the host can actually be provisioned.

    These are structural conditions, so there is nothing to retry.
    """

    if not host.is_root():
        raise PreconditionError("This installer must be run as root (try: sudo mcserver-installer)")

    if host.which(PACKAGE_MANAGER) is None:
        raise PreconditionError(
            f"{PACKAGE_MANAGER} not found. This installer is intended for Ubuntu/Debian systems."
        )

    if host.which(SERVICE_MANAGER) is None:
        raise PreconditionError(f"{SERVICE_MANAGER} not found. This installer requires systemd.")

    logger.info("Preconditions OK (root, %s, %s)", PACKAGE_MANAGER, SERVICE_MANAGER)
