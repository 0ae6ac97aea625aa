from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError

MC_VERSION = "1.21.1"
JAR_NAME = f"server-{MC_VERSION}.jar"
JAR_URL = "https://piston-data.mojang.com/v1/objects/59353fb40c36d304f2035d51e7d6e6baa98dc05c/server.jar"

SERVICE_PREFIX = "minecraft-"
UNIT_DIR = "/etc/systemd/system"

DEFAULTS: Dict[str, str] = {
    "user": "minecraft",
    "base_dir": "/opt/minecraft",
    "server_name": "server1",
    "min_ram": "2G",
    "max_ram": "4G",
    "motd": "My Minecraft Server",
    "port": "25565",
}


@dataclass(frozen=True)
class ProvisioningConfig:
    user: str
    base_dir: str
    server_name: str
    min_ram: str
    max_ram: str
    motd: str
    port: int

    @property
    def server_dir(self) -> str:
        return str(Path(self.base_dir) / self.server_name)

    @property
    def service_name(self) -> str:
        return SERVICE_PREFIX + self.server_name

    @property
    def unit_path(self) -> str:
        return f"{UNIT_DIR}/{self.service_name}.service"

    @property
    def jar_path(self) -> str:
        return str(Path(self.server_dir) / JAR_NAME)

    def summary(self) -> list[tuple[str, str]]:
        return [
            ("Minecraft user", self.user),
            ("Base directory", self.base_dir),
            ("Server directory", self.server_dir),
            ("Service name", self.service_name),
            ("Minecraft version", MC_VERSION),
            ("JVM Min RAM", self.min_ram),
            ("JVM Max RAM", self.max_ram),
            ("MOTD", self.motd),
            ("Port", str(self.port)),
        ]


def load_defaults(path: str | None) -> Dict[str, str]:
    """Return prompt defaults, optionally overridden by a YAML mapping.

    Only keys from DEFAULTS are accepted; values are shown to the operator as
    prompt defaults and still go through validation.
    """

    defaults = dict(DEFAULTS)
    if not path:
        return defaults

    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Defaults file not found: {path}")

    import yaml

    try:
        raw: Any = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Defaults file is not valid YAML: {p}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"Defaults file must contain a mapping/object: {p}")

    unknown = sorted(str(k) for k in raw if k not in DEFAULTS)
    if unknown:
        raise ConfigError(f"Unknown keys in defaults file {p}: {', '.join(unknown)}")

    for k, v in raw.items():
        if v is None:
            continue
        defaults[k] = str(v).strip()
    return defaults
