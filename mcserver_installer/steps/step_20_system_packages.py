from __future__ import annotations

import logging

from ..lib.pkg import DOWNLOAD_TOOL_PACKAGE, JAVA_PACKAGE, PackageRequest, apply_request
from ..pipeline import StepCtx, StepReport

logger = logging.getLogger(__name__)


class SystemPackagesStep:
    step_id = "20_system_packages"
    title = "Installing Java & download tools"

    def run(self, ctx: StepCtx) -> StepReport:
        update_first = ctx.prompter.confirm(
            "Run apt-get update/upgrade before installing Java? (Recommended on fresh systems)",
            True,
        )
        req = PackageRequest(packages=[JAVA_PACKAGE, DOWNLOAD_TOOL_PACKAGE], update_first=update_first)
        apply_request(ctx.run, req)
        ctx.prompter.info(f"Installed {', '.join(req.packages)}.")
        # apt-get install is a no-op for packages already present.
        return StepReport(self.step_id, changed=False, detail="packages ensured")
