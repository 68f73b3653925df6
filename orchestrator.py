"""
Batch orchestration shared by the `sketch` and `component` commands
Builds one prompt per variation and either prints them (dry run) or hands
each one to the Gemini CLI, sequentially or all at once.
"""

import argparse
import asyncio
import functools
import logging
import shlex
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Coroutine, Iterable, List, Optional, Sequence, Tuple, Union

from rich.console import Console

import gemini_cli
from gemini_cli import GeminiCommandError, GeminiUnavailableError

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

DEFAULT_COUNT = 5
DIVIDER = "─" * 80
UNAVAILABLE_EXIT_CODE = 127
INTERRUPTED_EXIT_CODE = 130

PromptFactory = Callable[[int], str]
Runner = Callable[[str], Awaitable[Any]]


@dataclass(frozen=True)
class GenerationRequest:
    """Everything collected from flags or interactive answers for one invocation."""
    subject: str
    kind: Optional[str] = None
    count: int = DEFAULT_COUNT
    sequential: bool = False
    dry_run: bool = False
    style: Optional[str] = None
    palette: Optional[str] = None
    platform: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    timeout: Optional[float] = None


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}")
    return number


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive number of seconds, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of seconds, got {value!r}")
    return number


def plural(count: int) -> str:
    return "" if count == 1 else "s"


def print_block(title: str, body: str) -> None:
    console.print(DIVIDER)
    console.print(title, markup=False)
    console.print(DIVIDER)
    console.print(body, markup=False)
    console.print(f"{DIVIDER}\n")


def print_prompt(index: int, total: int, prompt: str, dry_run: bool = False) -> None:
    title = f"Variation {index}/{total}:" if dry_run else f"📝 Variation {index}/{total} Prompt:"
    print_block(title, prompt)


async def run_sequential(build_prompt: PromptFactory, count: int, runner: Runner) -> None:
    """Build, print and run each variation in turn; the first failure stops the batch."""
    for index in range(1, count + 1):
        prompt = build_prompt(index)
        print_prompt(index, count, prompt)

        console.print(f"🎨 Generating variation {index}/{count}...\n")
        await runner(prompt)

        if index < count:
            console.print(f"\n✅ Variation {index} complete! Moving to next variation...\n")


async def gather_first_failure(coroutines: Iterable[Coroutine]) -> None:
    """
    Run coroutines concurrently and wait for all of them.

    The first exception to surface (in completion order) is kept and the
    remaining tasks are cancelled before it is re-raised. Which failure
    wins when several happen at about the same time is not defined.
    """
    tasks = [asyncio.ensure_future(coroutine) for coroutine in coroutines]
    first_error: Optional[BaseException] = None
    try:
        for finished in asyncio.as_completed(tasks):
            try:
                await finished
            except Exception as e:
                first_error = e
                break
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    if first_error is not None:
        raise first_error


async def run_concurrent(build_prompt: PromptFactory, count: int, runner: Runner) -> None:
    """Build and print every prompt, then run them all at once."""
    prompts = [build_prompt(index) for index in range(1, count + 1)]
    for index, prompt in enumerate(prompts, 1):
        print_prompt(index, count, prompt)

    console.print(f"🎨 Generating all {count} variations in parallel...\n")
    await gather_first_failure(runner(prompt) for prompt in prompts)


def print_dry_run(build_prompt: PromptFactory, count: int) -> None:
    console.print("📋 Generated prompts (dry run - not executing):\n")
    for index in range(1, count + 1):
        print_prompt(index, count, build_prompt(index), dry_run=True)
    console.print("💡 Tip: Remove --dry-run to execute the gemini command automatically")


async def execute_batch(
    build_prompt: PromptFactory,
    request: GenerationRequest,
    runner: Optional[Runner] = None,
) -> None:
    """
    Print or run ``request.count`` prompts built by ``build_prompt(index)``.

    Args:
        build_prompt: Called with the 1-based variation index
        request: Supplies count, dry_run, sequential and timeout
        runner: Coroutine function run once per prompt; defaults to the
            Gemini CLI with the request's timeout

    Raises:
        GeminiCommandError: From the first failing invocation
    """
    if request.dry_run:
        print_dry_run(build_prompt, request.count)
        return

    runner = runner or functools.partial(gemini_cli.execute_gemini_command, timeout=request.timeout)
    mode = "sequentially" if request.sequential else "in parallel"
    console.print(f"🚀 Generating {request.count} design{plural(request.count)} {mode}...\n")

    if request.sequential:
        await run_sequential(build_prompt, request.count, runner)
    else:
        await run_concurrent(build_prompt, request.count, runner)

    console.print(f"\n✨ All {request.count} variations generated successfully!")


def format_command(program: str, positionals: Sequence[str],
                   options: Sequence[Tuple[str, Union[str, int, bool, None]]]) -> str:
    """Shell command line reproducing a set of choices; falsy options are skipped."""
    parts: List[str] = [program] + [shlex.quote(value) for value in positionals]
    for flag, value in options:
        if value is True:
            parts.append(flag)
        elif value:
            parts.append(f"{flag} {shlex.quote(str(value))}")
    return " ".join(parts)


def print_rerun_hint(command: str) -> None:
    console.print(f"\n💡 To run this again without interactive prompts, use:\n   {command}", markup=False)


def run_cli(coroutine: Coroutine) -> int:
    """Run a command's main coroutine and translate failures into exit codes."""
    try:
        asyncio.run(coroutine)
    except GeminiCommandError as e:
        err_console.print(f"\n❌ {e}", markup=False)
        return e.exit_code
    except GeminiUnavailableError as e:
        err_console.print(f"❌ {e}", markup=False)
        return UNAVAILABLE_EXIT_CODE
    except KeyboardInterrupt:
        err_console.print("\n⚠️  Interrupted")
        return INTERRUPTED_EXIT_CODE
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        err_console.print(f"❌ Fatal error: {e}", markup=False)
        return 1
    return 0
