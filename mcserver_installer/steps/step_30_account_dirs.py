from __future__ import annotations

import logging

from ..lib.accounts import create_system_user
from ..lib.files import ensure_dir
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


class AccountDirsStep:
    step_id = "30_account_dirs"
    title = "Ensuring service user and server directory"

    def run(self, ctx: StepCtx) -> StepReport:
        cfg = ctx.cfg
        changes: list[str] = []

        if ctx.host.user_exists(cfg.user):
            # Never touch an existing account's attributes.
            logger.info("User %s already exists; reusing it", cfg.user)
            ctx.prompter.info(f"User {cfg.user} already exists. Using existing user.")
        else:
            create_system_user(ctx.run, cfg.user, home=cfg.base_dir)
            ctx.prompter.info(f"Created user {cfg.user}.")
            changes.append(f"created user {cfg.user}")

        if ensure_dir(ctx.path(cfg.server_dir), dry_run=ctx.dry_run):
            changes.append(f"created {cfg.server_dir}")
        ctx.prompter.info(f"Using server directory: {cfg.server_dir}")

        if changes:
            return StepReport(self.step_id, changed=True, detail="; ".join(changes))
        return StepReport(self.step_id, changed=False, detail="user and directory already exist")
