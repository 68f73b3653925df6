#!/usr/bin/env python3
"""
Website Sketch Generator
Builds page design prompts from presets and sends each variation to the
Gemini CLI.
"""

import argparse
import os
import sys
from typing import List, Optional

from rich.prompt import Prompt

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
    print_block,
    print_rerun_hint,
    run_cli,
)
from page_components import PAGE_COMPONENTS, PAGE_TYPES, describe_page_types
from presets import PLATFORMS, TUNING
from prompt_builder import build_page_prompt, generate_timestamp, shuffled_design_styles

PROG = "sketch"

EXAMPLES = f"""
available page types:
{describe_page_types()}

examples:
  {PROG}                                              # interactive mode
  {PROG} "shoe marketplace" home                      # generate 5 variations in parallel
  {PROG} "gaming company" about --dry-run             # preview prompts only
  {PROG} "hair salon" home -r ~/Downloads/inspiration.jpg
  {PROG} "pet adoption" cart -t dark -r ./mockup.png
  {PROG} "meditation app" home --platform watch -t minimal
  {PROG} "hair salon" home --count 10 --sequential
  {PROG} "crypto exchange" product --palette tokyo-night --tuning tech
  {PROG} "art gallery" home --palette "deep burgundy #8B0000, gold #FFD700"
  {PROG} "tech startup" sales -t "cyberpunk aesthetic with neon colors"

environment:
  SKETCH_GEMINI_MODEL     model passed to gemini -m (default {gemini_cli.DEFAULT_MODEL})
  SKETCH_GEMINI_BIN       gemini executable (default gemini)
  SKETCH_GEMINI_TIMEOUT   seconds before a variation is abandoned (default: none)
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="🎨 Website Sketch Generator: generate website page design variations with the Gemini CLI. "
                    "Run without arguments for interactive mode.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("website_type", nargs="?",
                        help='Type of website, e.g. "shoe marketplace" or "hair salon"')
    parser.add_argument("page_type", nargs="?", help=f"Page to design: {', '.join(PAGE_TYPES)}")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show generated prompts without executing")
    parser.add_argument("--count", "-c", type=positive_int,
                        help=f"Number of design variations to generate (default: {DEFAULT_COUNT})")
    parser.add_argument("--sequential", action="store_true",
                        help="Generate variations one at a time (default: parallel)")
    parser.add_argument("--tuning", "-t", help="Design tuning preset or custom direction")
    parser.add_argument("--palette", help="Color palette preset (dracula, nord, ...) or custom colors")
    parser.add_argument("--platform", "-p", help="Target platform preset (mobile, watch, ...) or custom text")
    parser.add_argument("--reference", "-r", help="Path to a reference image for visual inspiration")
    parser.add_argument("--timeout", type=positive_float,
                        help="Seconds to wait for each gemini invocation (default: no limit)")
    add_list_flags(parser)
    return parser


def add_list_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--list-tuning", action="store_true", help="List available tuning presets")
    parser.add_argument("--list-palettes", action="store_true", help="List available color palettes")
    parser.add_argument("--list-platforms", action="store_true", help="List available platform presets")


def print_requested_listing(argv: List[str]) -> bool:
    """Handle --list-* flags ahead of full parsing so other arguments cannot block them."""
    list_parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    add_list_flags(list_parser)
    args, _ = list_parser.parse_known_args(argv)

    if args.list_tuning:
        TUNING.list_all(console)
    elif args.list_palettes:
        PALETTES.list_all(console)
    elif args.list_platforms:
        PLATFORMS.list_all(console)
    else:
        return False
    return True


def request_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> GenerationRequest:
    if not args.website_type or not args.page_type:
        parser.error("both website-type and page-type are required")
    if args.page_type not in PAGE_COMPONENTS:
        parser.error(f"invalid page type {args.page_type!r} (valid options: {', '.join(PAGE_TYPES)})")
    if args.reference and not os.path.exists(os.path.expanduser(args.reference)):
        parser.error(f"reference image not found: {args.reference}")

    return GenerationRequest(
        subject=args.website_type,
        kind=args.page_type,
        count=args.count or DEFAULT_COUNT,
        sequential=args.sequential,
        dry_run=args.dry_run,
        style=args.tuning,
        palette=args.palette,
        platform=args.platform,
        reference=args.reference,
        timeout=args.timeout,
    )


def collect_interactive() -> GenerationRequest:
    console.print("\n🎨 Website Sketch Generator - Interactive Mode\n")

    website_type = Prompt.ask("What type of website?", default="shoe marketplace",
                              console=console)

    page_options = [(key, f"{page['name']} ({key})") for key, page in PAGE_COMPONENTS.items()]
    page_options.append((interactive.CUSTOM, "Custom (enter your own)"))
    page_type = interactive.select("Select page type", page_options, default="home")
    if page_type == interactive.CUSTOM:
        console.print("\n⚠️  Custom page types will use homepage structure as base.")
        page_type = "home"

    tuning = interactive.select_preset("Select design tuning", TUNING,
                                       "None (use default variety)",
                                       "Enter custom tuning direction")
    palette = interactive.select_preset("Select color palette", PALETTES,
                                        "None (use default colors)",
                                        'Enter custom color palette (e.g., "red #FF0000, blue #0000FF")')
    platform = interactive.select_preset("Select target platform", PLATFORMS,
                                         "Desktop Website (default)",
                                         "Enter custom platform description")
    reference = interactive.ask_path("Reference image path (optional)", required=False)

    return GenerationRequest(
        subject=website_type,
        kind=page_type,
        count=interactive.ask_count(),
        dry_run=interactive.ask_dry_run(),
        sequential=interactive.ask_sequential(),
        style=tuning,
        palette=palette,
        platform=platform,
        reference=reference,
    )


def equivalent_command(request: GenerationRequest) -> str:
    return format_command(PROG, [request.subject, request.kind], [
        ("--platform", request.platform),
        ("--tuning", request.style),
        ("--palette", request.palette),
        ("--reference", request.reference),
        ("--count", request.count if request.count != DEFAULT_COUNT else None),
        ("--sequential", request.sequential),
        ("--dry-run", request.dry_run),
    ])


def print_summary(request: GenerationRequest) -> None:
    console.print(f"\n🎨 Generating {request.count} design variation{plural(request.count)} for: "
                  f"{request.subject} - {request.kind} page", markup=False)
    if request.platform:
        console.print(f"📱 Platform: {PLATFORMS.display_name(request.platform)}", markup=False)
    if request.style:
        console.print(f"📐 Tuning: {TUNING.display_name(request.style)}", markup=False)
    if request.palette:
        console.print(f"🎨 Palette: {PALETTES.display_name(request.palette)}", markup=False)
    if request.reference:
        console.print(f"🖼️  Reference: {request.reference}", markup=False)
    console.print()


async def describe_reference(reference: str, staged_path: str, timeout: Optional[float]) -> str:
    console.print(f"🔍 Analyzing reference image: {reference}", markup=False)
    description = await gemini_cli.describe_reference_image(staged_path, timeout=timeout)
    console.print("✅ Reference image analysis complete\n")
    print_block("📝 Reference Image Description:", description)
    return description


async def generate(request: Optional[GenerationRequest]) -> None:
    from_interactive = request is None
    if from_interactive:
        request = collect_interactive()

    tuning_modifier = TUNING.modifier(request.style) if request.style else None
    platform_modifier = PLATFORMS.modifier(request.platform) if request.platform else None
    palette_modifier = PALETTES.modifier(request.palette) if request.palette else None
    timestamp = generate_timestamp()

    staged_reference = None
    if request.reference:
        staged_reference = gemini_cli.copy_image_to_workspace(
            request.reference, gemini_cli.create_run_dir(timestamp))
        console.print(f"📋 Copied reference image to workspace: {staged_reference}\n", markup=False)

    if not request.dry_run:
        await gemini_cli.ensure_gemini_available()

    reference_description = None
    if staged_reference and not request.dry_run:
        reference_description = await describe_reference(request.reference, staged_reference,
                                                         request.timeout)

    print_summary(request)

    style_order = shuffled_design_styles()

    def build_prompt(variation: int) -> str:
        return build_page_prompt(
            request.subject,
            request.kind,
            variation,
            tuning_modifier=tuning_modifier,
            reference_image_path=staged_reference,
            platform_modifier=platform_modifier,
            palette_modifier=palette_modifier,
            reference_description=reference_description,
            timestamp=timestamp,
            style_order=style_order,
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
