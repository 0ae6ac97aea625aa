from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from mcserver_installer.errors import CommandError
from mcserver_installer.lib.command import CmdResult


class FakeHost:
    def __init__(self, *, root: bool = True, tools: Sequence[str] = ("apt-get", "systemctl"), users=()):
        self.root = root
        self.tools = set(tools)
        self.users = set(users)

    def is_root(self) -> bool:
        return self.root

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.tools else None

    def user_exists(self, name: str) -> bool:
        return name in self.users


class ScriptedPrompter:
    """Answers prompts from scripts keyed by a substring of the prompt text.

    Unscripted prompts get their default, like pressing Enter.
    """

    def __init__(self, answers: Optional[Dict[str, List[str]]] = None, confirms: Optional[Dict[str, bool]] = None):
        self.answers = {k: list(v) for k, v in (answers or {}).items()}
        self.confirms = dict(confirms or {})
        self.asked: List[str] = []
        self.confirmed: List[str] = []
        self.infos: List[str] = []
        self.warnings: List[str] = []
        self.summaries: List[tuple] = []
        self.banners: List[tuple] = []

    def ask(self, prompt: str, default: str) -> str:
        self.asked.append(prompt)
        for key, queue in self.answers.items():
            if key in prompt and queue:
                return queue.pop(0)
        return ""

    def confirm(self, prompt: str, default: bool) -> bool:
        self.confirmed.append(prompt)
        for key, value in self.confirms.items():
            if key in prompt:
                return value
        return default

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def show_summary(self, title: str, rows) -> None:
        self.summaries.append((title, list(rows)))

    def banner(self, index: int, total: int, title: str) -> None:
        self.banners.append((index, total, title))


class RecordingRunner:
    def __init__(self, host: Optional[FakeHost] = None, returncodes: Optional[Dict[str, int]] = None):
        self.host = host
        self.returncodes = dict(returncodes or {})
        self.calls: List[List[str]] = []

    def __call__(self, argv, *, check=True, timeout_s=None, dry_run=False) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        rc = self.returncodes.get(argv[0], 0)
        if rc == 0 and self.host is not None and argv[0] == "useradd":
            self.host.users.add(argv[-1])
        if check and rc != 0:
            raise CommandError(f"Command failed ({rc})", argv=argv, returncode=rc)
        return CmdResult(argv=argv, returncode=rc, stdout="", stderr="boom" if rc else "")

    def commands(self, name: str) -> List[List[str]]:
        return [c for c in self.calls if c[0] == name]


class FakeFetcher:
    def __init__(self, payload: bytes = b"PK\x03\x04jar"):
        self.payload = payload
        self.requests = []

    def __call__(self, req, *, dry_run=False) -> Path:
        self.requests.append(req)
        dest = Path(req.dest)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(self.payload)
        return dest


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def runner(host):
    return RecordingRunner(host)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def ops_dir(tmp_path):
    d = tmp_path / "tool"
    d.mkdir()
    return d
