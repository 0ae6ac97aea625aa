from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file(p: Path, contents: str, *, dry_run: bool) -> None:
    if dry_run:
        logger.info("Would write %s", str(p))
        return
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(contents, encoding="utf-8")
    logger.info("Wrote %s", str(p))


def ensure_dir(p: Path, *, dry_run: bool) -> bool:
    """Create p (and parents). Returns True if it did not exist before."""
    if p.is_dir():
        return False
    if dry_run:
        logger.info("Would create directory %s", str(p))
        return True
    p.mkdir(parents=True, exist_ok=True)
    return True


def copy_file(src: Path, dst: Path, *, dry_run: bool) -> None:
    if not src.exists():
        raise FileNotFoundError(str(src))
    if dry_run:
        logger.info("Would copy %s -> %s", str(src), str(dst))
        return
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dst)


def same_bytes(a: Path, b: Path) -> bool:
    return a.is_file() and b.is_file() and a.read_bytes() == b.read_bytes()
