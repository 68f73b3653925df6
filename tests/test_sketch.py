import os

import pytest

import gemini_cli
import sketch
from gemini_cli import GeminiUnavailableError
from page_components import PAGE_TYPES


@pytest.mark.parametrize("flag, title", [
    ("--list-tuning", "Available Tuning Presets:"),
    ("--list-palettes", "Available Color Palettes:"),
    ("--list-platforms", "Available Platform Presets:"),
])
def test_list_flags(flag, title, capsys, recorded_gemini):
    assert sketch.main([flag]) == 0
    assert title in capsys.readouterr().out
    assert recorded_gemini.prompts == []


@pytest.mark.parametrize("argv", [
    ["shoe marketplace", "checkout"],
    ["shoe marketplace"],
    ["shoe marketplace", "home", "--count", "0"],
    ["shoe marketplace", "home", "--count", "-3"],
    ["shoe marketplace", "home", "--count", "abc"],
    ["shoe marketplace", "home", "--reference", "/definitely/missing.png"],
])
def test_invalid_arguments_exit_2_without_invoking(argv, recorded_gemini):
    with pytest.raises(SystemExit) as excinfo:
        sketch.main(argv)
    assert excinfo.value.code == 2
    assert recorded_gemini.prompts == []
    assert not recorded_gemini.probed


def test_invalid_page_type_lists_valid_options(capsys):
    with pytest.raises(SystemExit):
        sketch.main(["shoe marketplace", "checkout"])
    err = capsys.readouterr().err
    for page_type in PAGE_TYPES:
        assert page_type in err


@pytest.mark.parametrize("page_type", PAGE_TYPES)
def test_every_page_type_accepted(page_type, recorded_gemini):
    assert sketch.main(["shoe marketplace", page_type, "--dry-run", "--count", "1"]) == 0


def test_dry_run_prints_distinct_prompts_without_calls(capsys, recorded_gemini):
    assert sketch.main(["shoe marketplace", "home", "--dry-run", "--count", "3", "-t", "dark"]) == 0

    out = capsys.readouterr().out
    assert recorded_gemini.prompts == []
    assert not recorded_gemini.probed
    for index in (1, 2, 3):
        assert f"Variation {index}/3:" in out
        assert f"_v{index}.png" in out
    assert "Dark Mode Focused" in out


def test_concurrent_run_sends_every_variation(recorded_gemini):
    assert sketch.main(["hair salon", "contact", "--count", "3", "--palette", "nord"]) == 0

    assert recorded_gemini.probed
    assert len(recorded_gemini.prompts) == 3
    assert len(set(recorded_gemini.prompts)) == 3
    for prompt in recorded_gemini.prompts:
        assert "TYPE: hair salon" in prompt
        assert "COLOR PALETTE (MANDATORY):" in prompt


def test_sequential_failure_returns_child_exit_code(recorded_gemini):
    recorded_gemini.fail_on = {2: 7}
    assert sketch.main(["shoe marketplace", "home", "--sequential"]) == 7
    assert len(recorded_gemini.prompts) == 2


def test_missing_gemini_exits_127(monkeypatch, recorded_gemini):
    async def unavailable():
        raise GeminiUnavailableError("Gemini CLI not found")

    monkeypatch.setattr(gemini_cli, "ensure_gemini_available", unavailable)
    assert sketch.main(["shoe marketplace", "home"]) == 127
    assert recorded_gemini.prompts == []


def test_reference_is_staged_and_described(tmp_path, image_file, recorded_gemini):
    assert sketch.main(["hair salon", "home", "-r", str(image_file), "--count", "2"]) == 0

    staging = str(tmp_path / "staging")
    assert len(recorded_gemini.captured) == 1
    assert f"@{staging}" in recorded_gemini.captured[0]
    assert len(recorded_gemini.prompts) == 2
    for prompt in recorded_gemini.prompts:
        assert "REFERENCE IMAGE ANALYSIS:" in prompt
        assert recorded_gemini.description in prompt
        assert staging in prompt
    staged_files = [name for _, _, files in os.walk(staging) for name in files]
    assert staged_files == ["button.png"]


def test_reference_dry_run_skips_analysis(image_file, recorded_gemini, capsys):
    assert sketch.main(["hair salon", "home", "-r", str(image_file), "--dry-run", "--count", "1"]) == 0
    assert recorded_gemini.captured == []
    out = capsys.readouterr().out
    assert "Copied reference image to workspace" in out
    assert "REFERENCE IMAGE ANALYSIS:" not in out


def test_interactive_flow_prints_rerun_command(answers, capsys, recorded_gemini):
    answers(
        text=["gaming company", "2", "custom", "neon noir", "dracula", "none", ""],
        integers=[2],
        confirms=[True, False],
    )

    assert sketch.main([]) == 0

    out = capsys.readouterr().out
    assert recorded_gemini.prompts == []
    assert "Variation 2/2:" in out
    assert "apply-the-following" in out
    assert ("sketch 'gaming company' about --tuning 'neon noir' --palette dracula "
            "--count 2 --dry-run") in out


@pytest.mark.parametrize("argv", [
    ["--list-tuning", "--count", "0"],
    ["--list-tuning", "shoe marketplace", "checkout", "extra"],
    ["shoe marketplace", "home", "--unknown", "--list-tuning"],
])
def test_list_flag_wins_over_other_arguments(argv, capsys, recorded_gemini):
    assert sketch.main(argv) == 0
    assert "Available Tuning Presets:" in capsys.readouterr().out
    assert recorded_gemini.prompts == []
    assert not recorded_gemini.probed
