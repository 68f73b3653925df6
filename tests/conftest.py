import stat

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Stage images under tmp_path and ignore any developer configuration."""
    monkeypatch.setenv("SKETCH_TEMP_DIR", str(tmp_path / "staging"))
    for name in ("SKETCH_GEMINI_MODEL", "SKETCH_GEMINI_TIMEOUT", "SKETCH_GEMINI_BIN",
                 "SKETCH_IMAGE_MODEL", "NANOBANANA_MODEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "button.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nnot really an image")
    return path


@pytest.fixture
def fake_gemini(tmp_path, monkeypatch):
    """Install a shell script as the gemini executable and return its path."""

    def install(body: str):
        script = tmp_path / "gemini"
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        monkeypatch.setenv("SKETCH_GEMINI_BIN", str(script))
        return script

    return install


@pytest.fixture
def recorded_gemini(monkeypatch):
    """Replace the Gemini CLI with an in-process fake that records prompts."""
    import gemini_cli

    class Recorder:
        def __init__(self):
            self.prompts = []
            self.captured = []
            self.fail_on = {}
            self.description = "Dark hero banner, accent #123456, three-column grid."
            self.probed = False

        async def execute(self, prompt, capture_output=False, env=None, timeout=None):
            if capture_output:
                self.captured.append(prompt)
                return self.description
            self.prompts.append(prompt)
            exit_code = self.fail_on.get(len(self.prompts))
            if exit_code:
                raise gemini_cli.GeminiCommandError(
                    f"Gemini command failed with exit code {exit_code}", exit_code)

        async def probe(self):
            self.probed = True

    recorder = Recorder()
    monkeypatch.setattr(gemini_cli, "execute_gemini_command", recorder.execute)
    monkeypatch.setattr(gemini_cli, "ensure_gemini_available", recorder.probe)
    return recorder


@pytest.fixture
def answers(monkeypatch):
    """Script the answers given to rich prompts, one queue per prompt class."""
    from rich.prompt import Confirm, IntPrompt, Prompt

    def install(text=(), integers=(), confirms=()):
        queues = {Prompt: list(text), IntPrompt: list(integers), Confirm: list(confirms)}
        for prompt_class, queue in queues.items():
            def ask(*args, _queue=queue, **kwargs):
                return _queue.pop(0)
            monkeypatch.setattr(prompt_class, "ask", ask)
        return queues

    return install
