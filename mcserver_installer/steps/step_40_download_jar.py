from __future__ import annotations

import logging

from ..config import JAR_URL, MC_VERSION
from ..lib.download import DownloadRequest
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)

# Mojang's object URLs are keyed by the file's sha1.
JAR_SHA1 = JAR_URL.rstrip("/").split("/")[-2]


class DownloadJarStep:
    step_id = "40_download_jar"
    title = f"Downloading Minecraft server jar (v{MC_VERSION})"

    def run(self, ctx: StepCtx) -> StepReport:
        dest = ctx.path(ctx.cfg.jar_path)

        if dest.exists():
            ctx.prompter.info(f"Jar already exists at {ctx.cfg.jar_path}.")
            if not ctx.prompter.confirm("Re-download and overwrite existing jar?", False):
                ctx.prompter.info("Keeping existing jar.")
                return StepReport(self.step_id, changed=False, detail="keeping existing jar")
            overwrite = True
        else:
            overwrite = False

        ctx.fetcher(DownloadRequest(url=JAR_URL, dest=dest, overwrite=overwrite, sha1=JAR_SHA1), dry_run=ctx.dry_run)
        ctx.prompter.info("Jar re-downloaded." if overwrite else "Jar downloaded.")
        return StepReport(self.step_id, changed=True, detail=f"downloaded {ctx.cfg.jar_path}")
