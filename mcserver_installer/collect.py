from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .config import ProvisioningConfig
from .errors import InputRetriesExhausted, UserAborted
from .prompts import Prompter
from .validation import (
    ValidationResult,
    validate_abs_path,
    validate_port,
    validate_ram,
    validate_server_name,
    validate_text,
)

logger = logging.getLogger(__name__)

Validator = Callable[[str], ValidationResult]


def ask_validated(
    prompter: Prompter,
    prompt: str,
    default: str,
    validator: Validator = validate_text,
    *,
    max_attempts: Optional[int] = None,
):
    """Prompt until the validator accepts the answer.

    max_attempts=None keeps asking forever; bad input is reported, never fatal.
    """

    attempts = 0
    while True:
        raw = prompter.ask(prompt, default).strip() or default
        result = validator(raw)
        if result.ok:
            return result.value

        attempts += 1
        prompter.warn(result.error or "Invalid value.")
        logger.debug("Rejected %r for %r: %s", raw, prompt, result.error)
        if max_attempts is not None and attempts >= max_attempts:
            raise InputRetriesExhausted(f"No valid answer for {prompt!r} after {attempts} attempts")


def collect_config(
    prompter: Prompter,
    defaults: Dict[str, str],
    *,
    max_attempts: Optional[int] = None,
) -> ProvisioningConfig:
    def ask(prompt: str, key: str, validator: Validator = validate_text):
        return ask_validated(prompter, prompt, defaults[key], validator, max_attempts=max_attempts)

    user = ask("Minecraft system user", "user")
    base_dir = ask("Base directory for all Minecraft servers", "base_dir", validate_abs_path)
    server_name = ask("Server name (will be directory & service suffix)", "server_name", validate_server_name)
    min_ram = ask("Minimum RAM for JVM (e.g., 2G, 1024M)", "min_ram", validate_ram)
    max_ram = ask("Maximum RAM for JVM (e.g., 4G, 4096M)", "max_ram", validate_ram)
    motd = ask("Server MOTD (message of the day)", "motd")
    port = ask("Server port", "port", validate_port)

    return ProvisioningConfig(
        user=user,
        base_dir=base_dir,
        server_name=server_name,
        min_ram=min_ram,
        max_ram=max_ram,
        motd=motd,
        port=port,
    )


def confirm_config(prompter: Prompter, cfg: ProvisioningConfig) -> None:
    prompter.show_summary("Review configuration", cfg.summary())
    if not prompter.confirm("Proceed with installation?", True):
        raise UserAborted("Aborting by user request.")
    logger.info("Configuration confirmed: %s", dict(cfg.summary()))
