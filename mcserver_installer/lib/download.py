from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from ..errors import DownloadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 64
CONNECT_TIMEOUT_S = 15.0
READ_TIMEOUT_S = 60.0


@dataclass(frozen=True)
class DownloadRequest:
    url: str
    dest: Path
    overwrite: bool = False
    sha1: Optional[str] = None


def fetch_file(req: DownloadRequest, *, dry_run: bool = False) -> Path:
    """Download req.url to req.dest.

    Bytes go to a sibling .part file which only replaces dest once the body is
    complete (and matches sha1 when given). Any failure removes the .part file,
    so an interrupted run never leaves something that looks like a finished jar.
    """

    dest = Path(req.dest)
    if dest.exists() and not req.overwrite:
        raise FileExistsError(str(dest))

    if dry_run:
        logger.info("Would download %s -> %s", req.url, str(dest))
        return dest

    part = dest.with_name(dest.name + ".part")
    dest.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading %s -> %s", req.url, str(dest))

    digest = hashlib.sha1()
    written = 0
    try:
        with requests.get(req.url, stream=True, timeout=(CONNECT_TIMEOUT_S, READ_TIMEOUT_S)) as r:
            r.raise_for_status()
            # Content-Length counts encoded bytes; iter_content yields decoded ones.
            expected = None if r.headers.get("Content-Encoding") else r.headers.get("Content-Length")
            with open(part, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if not chunk:
                        continue
                    f.write(chunk)
                    digest.update(chunk)
                    written += len(chunk)

        if expected is not None and expected.isdigit() and int(expected) != written:
            raise DownloadError(f"Truncated download from {req.url}: got {written} of {expected} bytes")
        if req.sha1 and digest.hexdigest() != req.sha1.lower():
            raise DownloadError(
                f"Checksum mismatch for {req.url}: expected sha1 {req.sha1}, got {digest.hexdigest()}"
            )
        os.replace(part, dest)
    except requests.RequestException as e:
        part.unlink(missing_ok=True)
        raise DownloadError(f"Download failed for {req.url}: {e}") from e
    except BaseException:
        part.unlink(missing_ok=True)
        raise

    logger.info("Downloaded %d bytes to %s", written, str(dest))
    return dest
