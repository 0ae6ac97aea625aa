from __future__ import annotations

import logging

from ..lib.accounts import chown_tree
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


class OwnershipStep:
    step_id = "60_ownership"
    title = "Setting ownership on the base directory"

    def run(self, ctx: StepCtx) -> StepReport:
        chown_tree(ctx.run, ctx.cfg.base_dir, user=ctx.cfg.user)
        ctx.prompter.info(f"{ctx.cfg.base_dir} is owned by {ctx.cfg.user}.")
        return StepReport(self.step_id, changed=False, detail="ownership ensured")
