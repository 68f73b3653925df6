"""Interactive question helpers built on rich prompts."""

import os
from typing import List, Optional, Tuple

from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt

from orchestrator import DEFAULT_COUNT, console
from presets import PresetCatalog

CUSTOM = "custom"


def select(message: str, options: List[Tuple[str, str]], default: str) -> str:
    """Numbered menu; the answer may be the number or the key itself."""
    console.print(f"\n[bold]{message}:[/bold]")
    for number, (_, label) in enumerate(options, 1):
        console.print(f"  {number:>2}) {label}", markup=False)

    keys = [key for key, _ in options]
    while True:
        answer = Prompt.ask("Choice", default=default, console=console).strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return keys[int(answer) - 1]
        if answer in keys:
            return answer
        console.print(f"[red]Enter a number from 1 to {len(options)} or one of the listed keys.[/red]")


def select_preset(message: str, catalog: PresetCatalog, none_label: str,
                  custom_message: str, none_key: str = "none") -> Optional[str]:
    """
    Pick a preset key, free text, or nothing.

    Returns the preset key, the custom text the user typed, or None when the
    "none" entry was chosen.
    """
    options = [(none_key, none_label)] + catalog.choices() + [(CUSTOM, "Custom (enter your own)")]
    choice = select(message, options, default=none_key)
    if choice == CUSTOM:
        return Prompt.ask(custom_message, console=console).strip() or None
    if choice == none_key:
        return None
    return choice


def ask_path(message: str, required: bool = True) -> Optional[str]:
    """Ask for a file path until it exists (or is left empty when optional)."""
    while True:
        if required:
            value = Prompt.ask(message, console=console)
        else:
            value = Prompt.ask(message, default="", show_default=False, console=console)
        value = value.strip()
        if not value:
            if not required:
                return None
            console.print("[red]A path is required.[/red]")
            continue
        if os.path.exists(os.path.expanduser(value)):
            return value
        console.print(f"[red]File not found: {escape(value)}[/red]")


def ask_count() -> int:
    while True:
        count = IntPrompt.ask("Number of variations to generate", default=DEFAULT_COUNT, console=console)
        if count >= 1:
            return count
        console.print("[red]Enter a positive integer.[/red]")


def ask_dry_run() -> bool:
    return Confirm.ask("Dry run only (show prompts without executing)?", default=False, console=console)


def ask_sequential() -> bool:
    return Confirm.ask("Generate variations sequentially (slower but less resource intensive)?",
                       default=False, console=console)
