from __future__ import annotations

import logging

from ..lib.files import write_file
from ..lib.systemd import daemon_reload, enable_now, render_unit
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


class SystemdServiceStep:
    step_id = "70_systemd_service"
    title = "Creating and enabling the systemd service"

    def run(self, ctx: StepCtx) -> StepReport:
        cfg = ctx.cfg
        unit = ctx.path(cfg.unit_path)

        if unit.exists():
            ctx.prompter.info(f"Service file {cfg.unit_path} already exists.")
            if not ctx.prompter.confirm("Overwrite existing service file?", False):
                # Leave the unit alone entirely: no rewrite, no reload, no enable.
                ctx.prompter.info("Not overwriting service file. Skipping service creation.")
                return StepReport(self.step_id, changed=False, detail="keeping existing service file")

        write_file(unit, render_unit(cfg), dry_run=ctx.dry_run)
        daemon_reload(ctx.run)
        enable_now(ctx.run, cfg.service_name)
        ctx.prompter.info(f"Service {cfg.service_name} enabled and started.")
        return StepReport(self.step_id, changed=True, detail=f"registered {cfg.service_name}.service")
