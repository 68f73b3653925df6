#!/usr/bin/env python3
"""
Component Variation Generator
Generates design variations of a UI component from a reference screenshot.
"""

import argparse
import os
import sys
from typing import List, Optional

from rich.prompt import Confirm, Prompt

import gemini_cli
import interactive
from color_palettes import PALETTES
from orchestrator import (
    DEFAULT_COUNT,
    GenerationRequest,
    console,
    execute_batch,
    format_command,
    plural,
    positive_float,
    positive_int,
    print_rerun_hint,
    run_cli,
)
from page_components import COMPONENT_TYPES, list_component_types
from presets import VARIATION_STYLES
from prompt_builder import build_component_prompt, generate_timestamp

PROG = "component"
AUTO = "auto"

EXAMPLES = f"""
examples:
  {PROG}                                              # interactive mode
  {PROG} ./button.png                                 # 5 variations in parallel
  {PROG} ./card.png --style material
  {PROG} ./widget.png --type button --description "primary CTA button"
  {PROG} ./modal.png --style glassmorphism --palette nord
  {PROG} ./nav.png --count 10 --sequential
  {PROG} ./button.png --style ios --dry-run

how it works:
  1. Provide a reference image of your component
  2. Select (or specify) the component type
  3. Choose variation styles to explore different design approaches
  4. Each variation keeps the component's purpose while exploring a
     different visual treatment

tips:
  - Start with a clean screenshot of your component
  - Use --description to provide context about the component's purpose
  - Combine styles with color palettes for unique results
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="🎨 Component Variation Generator: generate design variations of a UI component "
                    "from a reference image. Run without arguments for interactive mode.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("image_path", nargs="?", help="Path to the component image")
    parser.add_argument("--dry-run", action="store_true", help="Show generated prompts without executing")
    parser.add_argument("--count", "-c", type=positive_int,
                        help=f"Number of variations to generate (default: {DEFAULT_COUNT})")
    parser.add_argument("--sequential", action="store_true",
                        help="Generate variations one at a time (default: parallel)")
    parser.add_argument("--type", "-t", dest="component_type",
                        help=f"Component type: {', '.join(COMPONENT_TYPES)}")
    parser.add_argument("--description", help="Custom component description")
    parser.add_argument("--style", "-s", help="Variation style preset (material, ios, ...) or custom direction")
    parser.add_argument("--palette", help="Color palette preset (dracula, nord, ...) or custom colors")
    parser.add_argument("--timeout", type=positive_float,
                        help="Seconds to wait for each gemini invocation (default: no limit)")
    add_list_flags(parser)
    return parser


def add_list_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--list-styles", action="store_true", help="List available variation style presets")
    parser.add_argument("--list-types", action="store_true", help="List available component types")
    parser.add_argument("--list-palettes", action="store_true", help="List available color palettes")


def print_requested_listing(argv: List[str]) -> bool:
    list_parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    add_list_flags(list_parser)
    args, _ = list_parser.parse_known_args(argv)

    if args.list_styles:
        VARIATION_STYLES.list_all(console)
    elif args.list_types:
        list_component_types(console)
    elif args.list_palettes:
        PALETTES.list_all(console)
    else:
        return False
    return True


def request_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GenerationRequest:
    if args.component_type and args.component_type not in COMPONENT_TYPES:
        parser.error(f"invalid component type {args.component_type!r} "
                     f"(valid options: {', '.join(COMPONENT_TYPES)})")
    if not args.image_path:
        parser.error("image path is required")
    if not os.path.exists(os.path.expanduser(args.image_path)):
        parser.error(f"image file not found: {args.image_path}")

    return GenerationRequest(
        subject=args.image_path,
        kind=args.component_type,
        count=args.count or DEFAULT_COUNT,
        sequential=args.sequential,
        dry_run=args.dry_run,
        style=args.style,
        palette=args.palette,
        description=args.description,
        timeout=args.timeout,
    )


def collect_interactive() -> GenerationRequest:
    console.print("\n🎨 Component Variation Generator - Interactive Mode\n")

    image_path = interactive.ask_path("Path to component image")

    type_options = [(AUTO, "Auto-detect (AI will determine type)")]
    type_options += [(key, f"{value['name']} - {value['description']}") for key, value in COMPONENT_TYPES.items()]
    component_type = interactive.select("Select component type", type_options, default=AUTO)
    component_type = None if component_type == AUTO else component_type

    description = None
    if component_type is None:
        if Confirm.ask("Add custom description for the component?", default=False, console=console):
            description = Prompt.ask("Describe this component", console=console).strip() or None

    style = interactive.select_preset("Select variation style", VARIATION_STYLES,
                                      "Mixed (variety of styles)",
                                      "Enter custom style direction", none_key="mixed")
    palette = interactive.select_preset("Select color palette", PALETTES,
                                        "None (keep original colors)",
                                        "Enter custom color palette")

    return GenerationRequest(
        subject=image_path,
        kind=component_type,
        description=description,
        style=style,
        palette=palette,
        count=interactive.ask_count(),
        dry_run=interactive.ask_dry_run(),
        sequential=interactive.ask_sequential(),
    )


def equivalent_command(request: GenerationRequest) -> str:
    return format_command(PROG, [request.subject], [
        ("--type", request.kind),
        ("--description", request.description),
        ("--style", request.style),
        ("--palette", request.palette),
        ("--count", request.count if request.count != DEFAULT_COUNT else None),
        ("--sequential", request.sequential),
        ("--dry-run", request.dry_run),
    ])


def print_summary(request: GenerationRequest) -> None:
    console.print(f"\n🎨 Generating {request.count} variation{plural(request.count)} from: {request.subject}",
                  markup=False)
    if request.kind:
        console.print(f"🧩 Component: {COMPONENT_TYPES[request.kind]['name']}", markup=False)
    elif request.description:
        console.print(f"🧩 Description: {request.description}", markup=False)
    if request.style:
        console.print(f"🎭 Style: {VARIATION_STYLES.display_name(request.style)}", markup=False)
    if request.palette:
        console.print(f"🎨 Palette: {PALETTES.display_name(request.palette)}", markup=False)
    console.print()


async def generate(request: Optional[GenerationRequest]) -> None:
    from_interactive = request is None
    if from_interactive:
        request = collect_interactive()

    style_modifier = VARIATION_STYLES.modifier(request.style) if request.style else None
    palette_modifier = PALETTES.modifier(request.palette) if request.palette else None
    timestamp = generate_timestamp()

    staged_image = gemini_cli.copy_image_to_workspace(request.subject, gemini_cli.create_run_dir(timestamp))
    print_summary(request)

    if not request.dry_run:
        await gemini_cli.ensure_gemini_available()

    def build_prompt(variation: int) -> str:
        return build_component_prompt(
            staged_image,
            request.kind,
            request.description,
            variation,
            style_modifier=style_modifier,
            palette_modifier=palette_modifier,
            timestamp=timestamp,
        )

    await execute_batch(build_prompt, request)

    if from_interactive:
        print_rerun_hint(equivalent_command(request))


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if print_requested_listing(argv):
        return 0

    parser = build_parser()
    args = parser.parse_args(argv)
    request = request_from_args(parser, args) if argv else None
    return run_cli(generate(request))


if __name__ == "__main__":
    sys.exit(main())
