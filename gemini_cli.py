"""
Gemini CLI wrapper module
Provides utilities for running the external `gemini` command-line tool and
staging input images where it can read them
"""

import asyncio
import logging
import os
import shutil
import tempfile
from typing import Dict, List, Optional

from dotenv import load_dotenv

from prompt_builder import build_reference_analysis_prompt, generate_timestamp

# Load environment variables
load_dotenv()


def get_log_level() -> int:
    """SKETCH_LOG_LEVEL as a logging level; unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("SKETCH_LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Set up logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-3-pro-image-preview"
DEFAULT_TEMP_DIR = ".temp-images"
TIMEOUT_EXIT_CODE = 124

# Short names accepted in SKETCH_GEMINI_MODEL
MODEL_MAPPINGS = {
    "flash": "gemini-2.5-flash",
    "pro": "gemini-2.5-pro",
    "flash-lite": "gemini-2.5-flash-lite",
    "2.5-flash": "gemini-2.5-flash",
    "2.5-pro": "gemini-2.5-pro",
    "2.5-flash-lite": "gemini-2.5-flash-lite",
}


class GeminiCommandError(Exception):
    """The Gemini CLI exited with a non-zero status."""

    def __init__(self, message: str, exit_code: int):
        super().__init__(message)
        self.exit_code = exit_code


class GeminiUnavailableError(Exception):
    """The Gemini CLI could not be started."""


def get_gemini_bin() -> str:
    return os.getenv("SKETCH_GEMINI_BIN", "gemini")


def get_model_name(requested_model: Optional[str] = None) -> str:
    """
    Get the model to pass to the Gemini CLI.

    Args:
        requested_model: Model name or alias; defaults to SKETCH_GEMINI_MODEL,
            then to DEFAULT_MODEL

    Returns:
        The full model identifier
    """
    requested_model = requested_model or os.getenv("SKETCH_GEMINI_MODEL") or DEFAULT_MODEL
    actual_model = MODEL_MAPPINGS.get(requested_model.lower(), requested_model)
    if actual_model != requested_model:
        logger.info(f"Model '{requested_model}' mapped to '{actual_model}'")
    return actual_model


def get_timeout(override: Optional[float] = None) -> Optional[float]:
    """Per-invocation timeout in seconds, or None to wait indefinitely."""
    if override is not None:
        return override
    raw = os.getenv("SKETCH_GEMINI_TIMEOUT")
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"SKETCH_GEMINI_TIMEOUT must be a number of seconds, got {raw!r}")
    return timeout if timeout > 0 else None


def build_child_env(extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    env = dict(os.environ)
    env.setdefault("NANOBANANA_MODEL", os.getenv("SKETCH_IMAGE_MODEL", DEFAULT_IMAGE_MODEL))
    if extra:
        env.update(extra)
    return env


def build_command(prompt: str, model: Optional[str] = None) -> List[str]:
    return [get_gemini_bin(), "-m", model or get_model_name(), "--yolo", prompt]


async def _terminate(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        process.terminate()
        await asyncio.wait_for(process.wait(), timeout=5)
    except ProcessLookupError:
        pass
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()


def _exit_status(returncode: int) -> int:
    # Killed by a signal: report it the way a shell would
    return 128 - returncode if returncode < 0 else returncode


async def ensure_gemini_available() -> None:
    """Probe `gemini --help` so a missing install fails before any work starts."""
    gemini_bin = get_gemini_bin()
    try:
        process = await asyncio.create_subprocess_exec(
            gemini_bin, "--help",
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as e:
        raise GeminiUnavailableError(
            f"Gemini CLI not found ({gemini_bin}). Install it and ensure it is accessible on your "
            "PATH, or point SKETCH_GEMINI_BIN at it."
        ) from e

    if await process.wait() != 0:
        raise GeminiUnavailableError(
            "Gemini CLI is installed but returned an error. Check your installation and try again."
        )


async def execute_gemini_command(
    prompt: str,
    capture_output: bool = False,
    env: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """
    Run `gemini -m <model> --yolo <prompt>` and wait for it to exit.

    stdout and stderr are inherited so the user sees Gemini's own output,
    unless ``capture_output`` is set, in which case stdout is collected and
    returned trimmed. stdin comes from the null device so concurrent runs
    never compete for the terminal.

    Raises:
        GeminiUnavailableError: The executable could not be started
        GeminiCommandError: Non-zero exit, or the timeout expired (exit code 124)
    """
    command = build_command(prompt)
    timeout = get_timeout(timeout)
    logger.debug(f"Running Gemini CLI with model: {command[2]} (prompt length {len(prompt)})")

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE if capture_output else None,
            env=build_child_env(env),
        )
    except OSError as e:
        raise GeminiUnavailableError(
            f"Gemini CLI not found ({command[0]}). Install it and ensure it is accessible on your PATH."
        ) from e

    try:
        stdout, _ = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        await _terminate(process)
        logger.error(f"Gemini command timed out after {timeout:g}s")
        raise GeminiCommandError(f"Gemini command timed out after {timeout:g}s", TIMEOUT_EXIT_CODE)
    except asyncio.CancelledError:
        await _terminate(process)
        raise

    if process.returncode != 0:
        exit_code = _exit_status(process.returncode)
        logger.error(f"Gemini command failed with exit code {exit_code}")
        raise GeminiCommandError(f"Gemini command failed with exit code {exit_code}", exit_code)

    if not capture_output:
        return None
    output = (stdout or b"").decode("utf-8", errors="replace").strip()
    logger.debug(f"Captured output of length: {len(output)}")
    return output


def get_temp_root() -> str:
    return os.path.abspath(os.getenv("SKETCH_TEMP_DIR", DEFAULT_TEMP_DIR))


def create_run_dir(timestamp: Optional[str] = None) -> str:
    """Create a fresh staging directory for one run under the temp root."""
    temp_root = get_temp_root()
    os.makedirs(temp_root, exist_ok=True)
    return tempfile.mkdtemp(prefix=f"{timestamp or generate_timestamp()}_", dir=temp_root)


def copy_image_to_workspace(image_path: str, run_dir: Optional[str] = None) -> str:
    """Copy an image into the run's staging directory and return the copy's path."""
    run_dir = run_dir or create_run_dir()
    dest_path = os.path.join(run_dir, os.path.basename(image_path))
    shutil.copyfile(os.path.expanduser(image_path), dest_path)
    logger.info(f"Staged {image_path} -> {dest_path}")
    return dest_path


async def describe_reference_image(staged_path: str, timeout: Optional[float] = None) -> str:
    """Ask Gemini for a detailed description of a staged reference image."""
    prompt = build_reference_analysis_prompt(staged_path)
    return await execute_gemini_command(prompt, capture_output=True, timeout=timeout)
