import io

from rich.console import Console

from mcserver_installer import prompts
from mcserver_installer.prompts import ConsolePrompter


def make_prompter():
    return ConsolePrompter(Console(file=io.StringIO(), width=100))


def test_blank_answer_falls_back_to_default(monkeypatch):
    monkeypatch.setattr(prompts.Prompt, "ask", classmethod(lambda cls, *a, **kw: "   "))

    assert make_prompter().ask("Server port", "25565") == "25565"


def test_answer_is_stripped(monkeypatch):
    monkeypatch.setattr(prompts.Prompt, "ask", classmethod(lambda cls, *a, **kw: " 4G "))

    assert make_prompter().ask("Maximum RAM", "4G") == "4G"


def test_summary_and_banner_render():
    p = make_prompter()
    p.show_summary("Review configuration", [("Port", "25565")])
    p.banner(2, 8, "Ensuring service user")

    out = p.console.file.getvalue()
    assert "25565" in out
    assert "[STEP 2/8]" in out
