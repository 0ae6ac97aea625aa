from __future__ import annotations

import logging

from ..lib.files import copy_file, same_bytes
from ..lib.server_files import OPS_FILE
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


class ImportOpsStep:
    step_id = "55_import_ops"
    title = "Checking for ops.json to import"

    def run(self, ctx: StepCtx) -> StepReport:
        src = ctx.ops_dir / OPS_FILE
        dst = ctx.path(ctx.cfg.server_dir) / OPS_FILE

        if not src.is_file():
            ctx.prompter.info(f"No ops.json found in {ctx.ops_dir}.")
            ctx.prompter.info(
                f"You can add OPs later with /op in-game or by creating ops.json in {ctx.cfg.server_dir}."
            )
            return StepReport(self.step_id, changed=False, detail="no ops.json to import")

        if same_bytes(src, dst):
            ctx.prompter.info(f"{dst} already matches {src}.")
            return StepReport(self.step_id, changed=False, detail="ops.json already imported")

        ctx.prompter.info(f"Found ops.json: {src}")
        if not ctx.prompter.confirm("Import this ops.json into the server directory?", True):
            ctx.prompter.warn("Skipping ops.json import.")
            return StepReport(self.step_id, changed=False, detail="import declined")

        copy_file(src, dst, dry_run=ctx.dry_run)
        ctx.prompter.info(f"Imported ops.json to {ctx.cfg.server_dir}.")
        return StepReport(self.step_id, changed=True, detail="imported ops.json")
