import argparse
import asyncio
import os
import time

import pytest

import orchestrator
from gemini_cli import GeminiCommandError, GeminiUnavailableError
from orchestrator import GenerationRequest


def build_prompt(index):
    return f"prompt {index}"


class FailingRunner:
    """Records prompts and fails with ``exit_code`` on call number ``fail_at``."""

    def __init__(self, fail_at=None, exit_code=7):
        self.fail_at = fail_at
        self.exit_code = exit_code
        self.prompts = []

    async def __call__(self, prompt):
        self.prompts.append(prompt)
        if len(self.prompts) == self.fail_at:
            raise GeminiCommandError(f"Gemini command failed with exit code {self.exit_code}", self.exit_code)


@pytest.mark.parametrize("value", ["0", "-3", "abc", "2.5"])
def test_positive_int_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        orchestrator.positive_int(value)


def test_positive_int_and_float_accept():
    assert orchestrator.positive_int("3") == 3
    assert orchestrator.positive_float("1.5") == 1.5
    with pytest.raises(argparse.ArgumentTypeError):
        orchestrator.positive_float("0")


def test_sequential_failure_stops_batch():
    runner = FailingRunner(fail_at=2, exit_code=7)
    request = GenerationRequest("shop", count=5, sequential=True)

    exit_code = orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request, runner))

    assert exit_code == 7
    assert runner.prompts == ["prompt 1", "prompt 2"]


def test_sequential_success_reports_progress(capsys):
    runner = FailingRunner()
    request = GenerationRequest("shop", count=3, sequential=True)

    assert orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request, runner)) == 0

    out = capsys.readouterr().out
    assert runner.prompts == ["prompt 1", "prompt 2", "prompt 3"]
    assert "Generating 3 designs sequentially" in out
    assert "Variation 1 complete! Moving to next variation" in out
    assert "Variation 3 complete" not in out
    assert "All 3 variations generated successfully!" in out


def test_concurrent_prints_every_prompt_before_running(capsys):
    snapshots = []

    async def runner(prompt):
        snapshots.append(capsys.readouterr().out)

    request = GenerationRequest("shop", count=3)
    assert orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request, runner)) == 0

    first = snapshots[0]
    for index in (1, 2, 3):
        assert f"Variation {index}/3 Prompt:" in first
        assert f"prompt {index}" in first
    assert "Generating all 3 variations in parallel" in first


def test_concurrent_failure_cancels_the_rest():
    cancelled = []

    async def runner(prompt):
        if prompt == "prompt 2":
            raise GeminiCommandError("Gemini command failed with exit code 5", 5)
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            cancelled.append(prompt)
            raise

    request = GenerationRequest("shop", count=3)
    exit_code = orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request, runner))

    assert exit_code == 5
    assert sorted(cancelled) == ["prompt 1", "prompt 3"]


def test_gather_first_failure_waits_for_all_on_success():
    finished = []

    async def work(name, delay):
        await asyncio.sleep(delay)
        finished.append(name)

    asyncio.run(orchestrator.gather_first_failure([work("slow", 0.05), work("fast", 0)]))
    assert finished == ["fast", "slow"]


def test_dry_run_never_invokes_runner(capsys):
    runner = FailingRunner(fail_at=1)
    request = GenerationRequest("shop", count=3, dry_run=True)

    assert orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request, runner)) == 0

    out = capsys.readouterr().out
    assert runner.prompts == []
    assert "Generated prompts (dry run - not executing)" in out
    for index in (1, 2, 3):
        assert f"Variation {index}/3:" in out


@pytest.mark.parametrize("error, expected", [
    (GeminiUnavailableError("Gemini CLI not found"), orchestrator.UNAVAILABLE_EXIT_CODE),
    (KeyboardInterrupt(), orchestrator.INTERRUPTED_EXIT_CODE),
    (RuntimeError("boom"), 1),
])
def test_run_cli_exit_codes(error, expected, capsys):
    async def fail():
        raise error

    assert orchestrator.run_cli(fail()) == expected


def test_run_cli_reports_fatal_errors_on_stderr(capsys):
    async def fail():
        raise RuntimeError("disk full")

    orchestrator.run_cli(fail())
    assert "Fatal error: disk full" in capsys.readouterr().err


def test_format_command_quotes_and_skips_empty_options():
    command = orchestrator.format_command("sketch", ["shoe marketplace", "home"], [
        ("--tuning", "dark"),
        ("--palette", "red #FF0000"),
        ("--count", None),
        ("--sequential", True),
        ("--dry-run", False),
    ])
    assert command == "sketch 'shoe marketplace' home --tuning dark --palette 'red #FF0000' --sequential"


def test_concurrent_failure_terminates_real_children(tmp_path, fake_gemini):
    pid_file = tmp_path / "sleepers.pid"
    fake_gemini(
        'if [ "$4" = "prompt 2" ]; then sleep 0.5; exit 5; fi\n'
        f'echo $$ >> "{pid_file}"\n'
        "exec sleep 20"
    )
    request = GenerationRequest("shop", count=3)

    started = time.monotonic()
    exit_code = orchestrator.run_cli(orchestrator.execute_batch(build_prompt, request))
    elapsed = time.monotonic() - started

    assert exit_code == 5
    assert elapsed < 10
    pids = [int(line) for line in pid_file.read_text().split()]
    assert len(pids) == 2
    for pid in pids:
        with pytest.raises(ProcessLookupError):
            os.kill(pid, 0)
