from __future__ import annotations

import logging
from typing import Callable

from ..config import JAR_NAME, ProvisioningConfig
from .command import CmdResult

logger = logging.getLogger(__name__)

Runner = Callable[..., CmdResult]

JAVA_BIN = "/usr/bin/java"
RESTART_SEC = 10
TIMEOUT_STOP_SEC = 60


def render_unit(cfg: ProvisioningConfig) -> str:
    return "\n".join(
        [
            "[Unit]",
            f"Description=Minecraft Server instance: {cfg.server_name}",
            "After=network.target",
            "",
            "[Service]",
            f"WorkingDirectory={cfg.server_dir}",
            f"User={cfg.user}",
            f"Group={cfg.user}",
            "Restart=always",
            f"RestartSec={RESTART_SEC}",
            "Nice=1",
            "",
            f"ExecStart={JAVA_BIN} -Xms{cfg.min_ram} -Xmx{cfg.max_ram} -jar {JAR_NAME} nogui",
            "",
            f"TimeoutStopSec={TIMEOUT_STOP_SEC}",
            "",
            "[Install]",
            "WantedBy=multi-user.target",
            "",
        ]
    )


def daemon_reload(run: Runner) -> None:
    run(["systemctl", "daemon-reload"])


def enable_now(run: Runner, service_name: str) -> None:
    # Issuing enable --now successfully is all we check; the unit may still fail later.
    run(["systemctl", "enable", "--now", f"{service_name}.service"])
    logger.info("Enabled and started %s.service", service_name)
