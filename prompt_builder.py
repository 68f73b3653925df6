"""
Prompt templates
Builds the instruction text handed to the Gemini CLI for page sketches,
component variations and reference-image analysis.
"""

import random
import re
from datetime import datetime
from typing import List, Optional, Sequence

from page_components import (
    COMPONENT_TYPES,
    DESIGN_STYLES,
    LAYOUT_APPROACHES,
    PAGE_COMPONENTS,
    PRESENTATION_FORMATS,
)


def generate_timestamp(now: Optional[datetime] = None) -> str:
    """Timestamp used in suggested filenames, e.g. 20250114_093005."""
    return (now or datetime.now()).strftime("%Y%m%d_%H%M%S")


def slugify(text: str) -> str:
    """
    Turn free text into a filename-safe slug.

    "Gaming Company!" -> "gaming-company". Applying it twice gives the same
    result as applying it once.
    """
    slug = text.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-").strip()


def modifier_slug(modifier: Optional[str], separator: str, default: str) -> str:
    """Slug of the first clause of a modifier, truncated to 20 characters."""
    if not modifier:
        return default
    return slugify(modifier.split(separator)[0][:20]) or default


def shuffled_design_styles(rng: Optional[random.Random] = None) -> List[str]:
    styles = list(DESIGN_STYLES)
    (rng or random).shuffle(styles)
    return styles


def page_base_filename(
    website_type: str,
    page_type: str,
    timestamp: str,
    tuning_modifier: Optional[str] = None,
    platform_modifier: Optional[str] = None,
) -> str:
    website_slug = slugify(website_type)
    platform_slug = modifier_slug(platform_modifier, ":", "web")
    tuning_slug = modifier_slug(tuning_modifier, ".", "default")
    return f"{website_slug}_{page_type}_{platform_slug}_{tuning_slug}_{timestamp}"


def build_page_prompt(
    website_type: str,
    page_type: str,
    variation: int,
    tuning_modifier: Optional[str] = None,
    reference_image_path: Optional[str] = None,
    platform_modifier: Optional[str] = None,
    palette_modifier: Optional[str] = None,
    reference_description: Optional[str] = None,
    timestamp: Optional[str] = None,
    style_order: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Build the prompt for one website page design variation.

    Args:
        website_type: Free-text subject, e.g. "shoe marketplace"
        page_type: Key of PAGE_COMPONENTS; callers validate it
        variation: 1-based variation index
        tuning_modifier: Resolved design direction text
        reference_image_path: Staged copy of the inspiration image
        platform_modifier: Resolved platform text
        palette_modifier: Resolved colour palette text
        reference_description: Analysis of the reference image
        timestamp: Filename timestamp; generated when omitted
        style_order: Design styles indexed by variation when no tuning is
            given; shuffled with ``rng`` when omitted

    Returns:
        The full prompt text
    """
    page = PAGE_COMPONENTS[page_type]
    timestamp = timestamp or generate_timestamp()

    if tuning_modifier:
        layout_approach = LAYOUT_APPROACHES[(variation - 1) % len(LAYOUT_APPROACHES)]
    else:
        styles = style_order or shuffled_design_styles(rng)
        layout_approach = styles[(variation - 1) % len(styles)]
    presentation_format = PRESENTATION_FORMATS[(variation - 1) % len(PRESENTATION_FORMATS)]

    if tuning_modifier or platform_modifier:
        intro = (f"Create ONE website design (variation {variation}) that adheres to the "
                 "specified design direction and platform requirements.")
    else:
        intro = (f"Create ONE professional website design mockup (variation {variation}) "
                 "with a distinct visual approach.")

    sections = []
    if platform_modifier:
        sections.append(f"PLATFORM TARGET (MANDATORY):\n{platform_modifier}")
    if tuning_modifier:
        sections.append(
            f"DESIGN DIRECTION (MANDATORY):\n{tuning_modifier}\n\n"
            "This design must follow this direction while exploring the layout approach below."
        )
    if palette_modifier:
        sections.append(
            f"COLOR PALETTE (MANDATORY):\n{palette_modifier}\n\n"
            "All colors must follow the specified palette."
        )
    if reference_image_path or reference_description:
        reference_lines = ["REFERENCE IMAGE FOR INSPIRATION:"]
        if reference_image_path:
            reference_lines.append(
                "Use this image as visual inspiration for design style, color palette, layout "
                f"approach, and overall aesthetic: {reference_image_path}"
            )
        reference_lines.append("Adapt and remix elements from this reference while creating this variation.")
        if reference_description:
            reference_lines.append(f"\nREFERENCE IMAGE ANALYSIS:\n{reference_description}")
        sections.append("\n".join(reference_lines))
    sections.append(f"LAYOUT APPROACH FOR THIS VARIATION:\n{layout_approach}")

    base_filename = page_base_filename(website_type, page_type, timestamp,
                                       tuning_modifier, platform_modifier)
    website_slug = slugify(website_type)
    naming_lines = [
        "FILE NAMING CONVENTION:",
        f"Save this design as: {base_filename}_v{variation}.png",
        "",
        "Where:",
        f'- "{website_slug}" = website/app type',
        f'- "{page_type}" = page type',
        f'- "{modifier_slug(platform_modifier, ":", "web")}" = platform target',
    ]
    if tuning_modifier:
        naming_lines.append(f'- "{modifier_slug(tuning_modifier, ".", "default")}" = design direction')
    naming_lines.append(f'- "{timestamp}" = generation timestamp')
    naming_lines.append(f'- "v{variation}" = variation number')
    sections.append("\n".join(naming_lines))

    elements = "\n".join(f"  - {element}" for element in page["elements"])
    body = "\n\n".join(sections)

    return f"""/generate {intro}

TYPE: {website_type} {page['name']}

{body}

REQUIRED UI ELEMENTS:
{elements}

PRESENTATION FORMAT:
Render this design as a {presentation_format}.

CRITICAL REQUIREMENTS:
- Create EXACTLY ONE fully realized, professional website design (NOT paper sketches or hand-drawn wireframes)
- Use actual UI elements: buttons, images, typography, icons, colors, and modern web design patterns
- Show realistic content with proper hierarchy, spacing, and visual balance
- Include representative imagery, color schemes, and typography appropriate for a {website_type}
- The design must look like a real, production-ready website layout
- Display as a digital mockup that could be implemented as an actual website
- If a design direction is specified, follow it while exploring the layout approach above
- If a platform is specified, the design must be appropriate for that platform
- Ensure the design is immediately recognizable as a {website_type} {page['name']}

DO NOT INCLUDE:
- Hand-drawn sketches, marker drawings, or pen-and-paper wireframes
- Photographed paper with annotations or notes
- Blueprint-style technical drawings
- Rough concept sketches or gestural drawings
- Any appearance of physical paper, notebooks, or sketchbooks
- Visible marker strokes, pen lines, or hand-drawn elements
- Design annotations, arrows, or handwritten notes
- Low-fidelity gray-box wireframes without visual design
- Browser chrome, address bars, URL bars, browser tabs, or window frames
- Operating system UI elements, title bars, or window controls
- Browser bookmarks, extensions, or browser navigation buttons
- Any browser interface elements (back/forward buttons, reload, favorites, etc.)

INSTEAD, CREATE:
- A polished, high-fidelity digital design showing ONLY the website content
- Full-color UI with realistic imagery and graphics
- Professional typography and modern web design aesthetics
- An actual website interface that looks ready to launch
- A clean mockup focused entirely on the website design itself
- Direct view of the website without any browser or device framing"""


def component_filename(component_type: Optional[str], style_modifier: Optional[str],
                       timestamp: str, variation: int) -> str:
    type_slug = component_type or "component"
    style_slug = modifier_slug(style_modifier, ".", "var")
    return f"{type_slug}_{style_slug}_{timestamp}_v{variation}.png"


def build_component_prompt(
    image_path: str,
    component_type: Optional[str],
    description: Optional[str],
    variation: int,
    style_modifier: Optional[str] = None,
    palette_modifier: Optional[str] = None,
    timestamp: Optional[str] = None,
) -> str:
    """Build the prompt for one redesign of the component shown in ``image_path``."""
    timestamp = timestamp or generate_timestamp()
    type_slug = component_type or "component"
    filename = component_filename(component_type, style_modifier, timestamp, variation)
    unique_id = f"{type_slug}_v{variation}_{timestamp}"

    component_instructions = ""
    if component_type and component_type in COMPONENT_TYPES:
        component = COMPONENT_TYPES[component_type]
        focus_areas = "\n".join(f"- {area}" for area in component["focusAreas"])
        component_instructions = (f"\nCOMPONENT TYPE: {component['name']}\n\n"
                                  f"FOCUS AREAS FOR THIS COMPONENT:\n{focus_areas}\n")
    elif description:
        component_instructions = f"\nCOMPONENT DESCRIPTION: {description}\n"

    if style_modifier:
        style_section = (f"\n\nDESIGN STYLE (MANDATORY):\n{style_modifier}\n\n"
                         "This variation MUST follow this design style direction.\n")
    else:
        style_section = ("\n\nDESIGN APPROACH:\nCreate a unique variation exploring different visual "
                         "treatments while maintaining the component's functionality.\n")

    palette_section = ""
    if palette_modifier:
        palette_section = (f"\n\nCOLOR PALETTE (MANDATORY):\n{palette_modifier}\n\n"
                           "All colors must follow the specified palette.\n")

    return f"""/generate {unique_id} Create ONE single component design variation {variation} based on the reference image.

REFERENCE IMAGE: {image_path}

Analyze the reference image to understand the component's purpose, structure, and current design.{component_instructions}{style_section}{palette_section}

FILE NAMING:
Save this variation as: {filename}

CRITICAL REQUIREMENTS:
- CREATE EXACTLY ONE COMPONENT VARIATION - not multiple versions side-by-side
- Maintain the component's core functionality and purpose
- Keep the same component type and use case as the reference
- Preserve key interactive elements (buttons, inputs, etc.)
- Focus on visual design exploration, not structural changes
- Create a production-ready component design
- Show the component in its primary state (default, not hover/active unless specified)
- Use realistic content (not lorem ipsum - use appropriate labels/text)
- Consider responsive sizing and touch targets
- Include proper spacing and alignment

DO NOT:
- Create comparison views or multiple variations in one image
- Change the fundamental purpose or type of the component
- Show browser chrome, device frames, or window decorations
- Include design annotations, arrows, or documentation
- Show before/after comparisons
- Create multiple state variations in one image (unless it's a states showcase)
- Generate low-fidelity wireframes or sketches
- Include measurement guides or specs

INSTEAD, CREATE:
- ONE SINGLE COMPONENT VARIATION as a clean, isolated design
- Polished, high-fidelity UI component
- Clear, professional presentation on neutral background
- Component shown at appropriate scale for clarity
- Focus entirely on the component design itself
- Visual design that could be implemented immediately

The goal is to explore different visual design directions for this component while maintaining its core purpose and usability."""


def build_reference_analysis_prompt(image_path: str) -> str:
    """Prompt asking Gemini to describe a staged reference image in detail."""
    return f"""Analyze this image in complete detail @{image_path}

Provide a comprehensive description that captures:

1. LAYOUT & COMPOSITION:
   - Overall layout structure and grid system
   - Content organization and hierarchy
   - Spacing, padding, and visual rhythm
   - Element positioning and alignment

2. VISUAL DESIGN:
   - Color palette (specific colors used)
   - Typography (font styles, sizes, weights)
   - Visual style and aesthetic (modern, minimal, bold, etc.)
   - Design patterns and UI conventions used

3. UI ELEMENTS:
   - All interactive elements (buttons, links, forms, etc.)
   - Navigation structure
   - Content sections and their relationships
   - Icons, imagery, and graphics

4. DESIGN DETAILS:
   - Shadows, borders, and effects
   - Corner radius and shapes
   - Visual accents and highlights
   - Texture or background treatments

5. CONTENT STRUCTURE:
   - Text hierarchy and readability
   - Image placement and treatment
   - Call-to-action emphasis
   - Information density

Be specific about colors (hex codes if identifiable), measurements, and visual relationships. This description will guide AI to create variations that preserve the reference's core design language."""
