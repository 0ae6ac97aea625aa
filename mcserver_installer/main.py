from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from .collect import collect_config, confirm_config
from .config import load_defaults
from .errors import InstallerError, PreconditionError, UserAborted
from .lib.command import DEFAULT_TIMEOUT_S, run_cmd
from .lib.download import fetch_file
from .lib.host import Host, SystemHost
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, StepCtx, run_pipeline
from .preflight import check_preconditions
from .prompts import ConsolePrompter, Prompter
from .steps import (
    AccountDirsStep,
    DownloadJarStep,
    FirewallStep,
    ImportOpsStep,
    OwnershipStep,
    ServerFilesStep,
    SystemdServiceStep,
    SystemPackagesStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        SystemPackagesStep(),
        AccountDirsStep(),
        DownloadJarStep(),
        ServerFilesStep(),
        ImportOpsStep(),
        OwnershipStep(),
        SystemdServiceStep(),
        FirewallStep(),
    ]


def run(
    *,
    prompter: Prompter,
    host: Host,
    defaults_path: Optional[str] = None,
    root: Path = Path("/"),
    ops_dir: Optional[Path] = None,
    dry_run: bool = False,
    timeout_s: Optional[float] = DEFAULT_TIMEOUT_S,
    max_attempts: Optional[int] = None,
    runner: Callable[..., Any] = run_cmd,
    fetcher: Callable[..., Any] = fetch_file,
) -> PipelineResult:
    """Check the host, collect and confirm the configuration, then provision.

    Raises UserAborted if the operator declines the review; nothing has been
    touched at that point.
    """

    check_preconditions(host)

    defaults = load_defaults(defaults_path)
    cfg = collect_config(prompter, defaults, max_attempts=max_attempts)
    confirm_config(prompter, cfg)

    ctx = StepCtx(
        cfg=cfg,
        prompter=prompter,
        host=host,
        root=root,
        ops_dir=ops_dir if ops_dir is not None else Path.cwd(),
        dry_run=dry_run,
        timeout_s=timeout_s,
        runner=runner,
        fetcher=fetcher,
    )

    def on_step(index: int, total: int, step) -> None:
        prompter.banner(index, total, step.title)

    try:
        result = run_pipeline(ctx=ctx, steps=build_steps(), on_step=on_step)
    except Exception:
        logger.exception("Installer failed")
        raise

    logger.info("Changed steps: %s", ",".join(result.changed_steps) or "none")
    prompter.show_summary(
        "Setup complete",
        [
            ("Service name", cfg.service_name),
            ("Server dir", cfg.server_dir),
            ("Port", str(cfg.port)),
        ],
    )
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="mcserver-installer")
    p.add_argument("--defaults", default=None, help="YAML file overriding the prompt defaults")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to installer log")
    p.add_argument("--ops-dir", default=None, help="Directory searched for ops.json (default: cwd)")
    p.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT_S,
        help="Seconds to wait for each external command (0 waits forever)",
    )
    p.add_argument("--dry-run", action="store_true", help="Log commands and writes without executing them")

    args = p.parse_args(argv)

    configure_logging(log_path=args.log)
    prompter = ConsolePrompter()

    try:
        run(
            prompter=prompter,
            host=SystemHost(),
            defaults_path=args.defaults,
            ops_dir=Path(args.ops_dir) if args.ops_dir else None,
            dry_run=bool(args.dry_run),
            timeout_s=args.timeout or None,
        )
    except UserAborted as e:
        logger.info("Aborted by operator")
        prompter.info(str(e))
        return 0
    except PreconditionError as e:
        logger.error("Precondition failed: %s", e)
        prompter.warn(str(e))
        return 1
    except InstallerError as e:
        logger.error("Installer failed: %s", e)
        prompter.warn(f"An error occurred: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
