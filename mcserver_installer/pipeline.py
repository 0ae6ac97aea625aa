from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional, Protocol, Sequence

from .config import ProvisioningConfig
from .lib.command import DEFAULT_TIMEOUT_S, CmdResult, run_cmd
from .lib.download import fetch_file
from .lib.host import Host
from .prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepCtx:
    """Everything a step may touch. Immutable for the whole run."""

    cfg: ProvisioningConfig
    prompter: Prompter
    host: Host
    # Filesystem paths are resolved under root; commands see the real paths.
    root: Path = Path("/")
    ops_dir: Path = field(default_factory=Path.cwd)
    dry_run: bool = False
    timeout_s: Optional[float] = DEFAULT_TIMEOUT_S
    runner: Callable[..., CmdResult] = run_cmd
    fetcher: Callable[..., Any] = fetch_file

    def path(self, p: str) -> Path:
        return self.root / p.lstrip("/")

    def run(self, argv: Sequence[str], *, check: bool = True) -> CmdResult:
        return self.runner(argv, check=check, timeout_s=self.timeout_s, dry_run=self.dry_run)


@dataclass(frozen=True)
class StepReport:
    step_id: str
    changed: bool
    detail: str = ""


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    title: str

    def run(self, ctx: StepCtx) -> StepReport:
        ...


ProgressCallback = Callable[[int, int, Step], None]


@dataclass(frozen=True)
class PipelineResult:
    reports: List[StepReport]

    @property
    def changed_steps(self) -> List[str]:
        return [r.step_id for r in self.reports if r.changed]

    @property
    def unchanged_steps(self) -> List[str]:
        return [r.step_id for r in self.reports if not r.changed]


def run_pipeline(
    *,
    ctx: StepCtx,
    steps: Sequence[Step],
    on_step: Optional[ProgressCallback] = None,
) -> PipelineResult:
    """Run steps strictly in order; the first exception ends the run.

    Idempotency lives in the steps themselves: each one probes the live system
    and skips work that is already done.
    """

    reports: List[StepReport] = []
    total = len(steps)

    for index, step in enumerate(steps, start=1):
        if on_step is not None:
            on_step(index, total, step)
        logger.info("Running step %s (%d/%d)", step.step_id, index, total)
        try:
            report = step.run(ctx)
        except Exception:
            logger.error("Step %s failed", step.step_id)
            raise
        logger.info(
            "Step %s %s%s",
            step.step_id,
            "changed" if report.changed else "unchanged",
            f": {report.detail}" if report.detail else "",
        )
        reports.append(report)

    return PipelineResult(reports=reports)
