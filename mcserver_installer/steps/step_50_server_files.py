from __future__ import annotations

import logging
from pathlib import Path

from ..lib.files import write_file
from ..lib.server_files import EULA_FILE, PROPERTIES_FILE, render_eula, render_properties
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


def _write_unless_kept(ctx: StepCtx, p: Path, name: str, contents: str) -> bool:
    """Write a generated file, asking first if one is already there.

    Returns True if the file was written.
    """

    if p.exists():
        ctx.prompter.info(f"{name} already exists.")
        if not ctx.prompter.confirm(f"Overwrite existing {name} with a basic template?", False):
            ctx.prompter.info(f"Keeping existing {name}.")
            return False
        write_file(p, contents, dry_run=ctx.dry_run)
        ctx.prompter.info(f"{name} overwritten with template.")
        return True

    write_file(p, contents, dry_run=ctx.dry_run)
    ctx.prompter.info(f"{name} created.")
    return True


class ServerFilesStep:
    step_id = "50_server_files"
    title = "Writing eula.txt and server.properties"

    def run(self, ctx: StepCtx) -> StepReport:
        server_dir = ctx.path(ctx.cfg.server_dir)
        written = [
            name
            for name, contents in [
                (EULA_FILE, render_eula()),
                (PROPERTIES_FILE, render_properties(ctx.cfg)),
            ]
            if _write_unless_kept(ctx, server_dir / name, name, contents)
        ]
        if written:
            return StepReport(self.step_id, changed=True, detail="wrote " + ", ".join(written))
        return StepReport(self.step_id, changed=False, detail="keeping existing files")
