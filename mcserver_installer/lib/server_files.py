from __future__ import annotations

from ..config import ProvisioningConfig

EULA_FILE = "eula.txt"
PROPERTIES_FILE = "server.properties"
OPS_FILE = "ops.json"

# Not asked for; edit server.properties afterwards to change them.
FIXED_PROPERTIES = [
    ("enable-command-block", "false"),
    ("max-players", "20"),
    ("online-mode", "true"),
    ("level-name", "world"),
    ("gamemode", "survival"),
    ("difficulty", "normal"),
]


def render_eula() -> str:
    return (
        "# Generated by setup script. By setting eula=true you indicate your agreement "
        "to the Minecraft EULA:\n"
        "# https://aka.ms/MinecraftEULA\n"
        "eula=true\n"
    )


def render_properties(cfg: ProvisioningConfig) -> str:
    lines = ["# Basic generated config - edit to taste."]
    lines.append(f"motd={cfg.motd}")
    lines.append(f"server-port={cfg.port}")
    lines.extend(f"{k}={v}" for k, v in FIXED_PROPERTIES)
    return "\n".join(lines) + "\n"
