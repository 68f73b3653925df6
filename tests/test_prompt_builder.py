import random
from datetime import datetime

import pytest

from page_components import DESIGN_STYLES, LAYOUT_APPROACHES, PAGE_COMPONENTS, PRESENTATION_FORMATS
from presets import PLATFORMS, TUNING, VARIATION_STYLES
from prompt_builder import (
    build_component_prompt,
    build_page_prompt,
    build_reference_analysis_prompt,
    generate_timestamp,
    slugify,
)

TS = "20250101_120000"


def test_generate_timestamp_format():
    assert generate_timestamp(datetime(2025, 1, 14, 9, 30, 5)) == "20250114_093005"


@pytest.mark.parametrize("text, expected", [
    ("Gaming Company!", "gaming-company"),
    ("shoe marketplace", "shoe-marketplace"),
    ("  a  --  b  ", "a-b"),
    ("Café & Bar", "café-bar"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["Gaming Company!", "  --Hair   Salon-- ", "Push creative bounda"])
def test_slugify_is_idempotent(text):
    assert slugify(slugify(text)) == slugify(text)


def test_page_prompt_default_filename_and_header():
    prompt = build_page_prompt("Gaming Company!", "about", 3, timestamp=TS, rng=random.Random(1))
    assert prompt.startswith("/generate Create ONE professional website design mockup (variation 3)")
    assert "TYPE: Gaming Company! about page" in prompt
    assert f"Save this design as: gaming-company_about_web_default_{TS}_v3.png" in prompt
    for optional in ("PLATFORM TARGET", "DESIGN DIRECTION", "COLOR PALETTE", "REFERENCE IMAGE"):
        assert optional not in prompt


def test_page_prompt_slugs_platform_and_tuning():
    prompt = build_page_prompt(
        "shoe marketplace", "home", 1,
        tuning_modifier=TUNING.modifier("creative"),
        platform_modifier=PLATFORMS.modifier("mobile"),
        timestamp=TS,
    )
    assert ("Save this design as: "
            f"shoe-marketplace_home_design-as-a-native-m_push-creative-bounda_{TS}_v1.png") in prompt
    assert prompt.startswith("/generate Create ONE website design (variation 1) that adheres")


def test_page_prompt_sections_in_fixed_order():
    prompt = build_page_prompt(
        "hair salon", "home", 2,
        tuning_modifier=TUNING.modifier("dark"),
        reference_image_path="/tmp/staged/ref.png",
        platform_modifier=PLATFORMS.modifier("watch"),
        palette_modifier="Use the following custom color palette: red #FF0000",
        reference_description="Two column grid with serif headings",
        timestamp=TS,
    )
    headings = [
        "PLATFORM TARGET (MANDATORY):",
        "DESIGN DIRECTION (MANDATORY):",
        "COLOR PALETTE (MANDATORY):",
        "REFERENCE IMAGE FOR INSPIRATION:",
        "REFERENCE IMAGE ANALYSIS:",
        "LAYOUT APPROACH FOR THIS VARIATION:",
        "FILE NAMING CONVENTION:",
        "REQUIRED UI ELEMENTS:",
        "PRESENTATION FORMAT:",
        "CRITICAL REQUIREMENTS:",
        "DO NOT INCLUDE:",
        "INSTEAD, CREATE:",
    ]
    positions = [prompt.index(heading) for heading in headings]
    assert positions == sorted(positions)
    assert "/tmp/staged/ref.png" in prompt
    assert "Two column grid with serif headings" in prompt
    assert "red #FF0000" in prompt


def test_page_prompt_lists_required_elements():
    prompt = build_page_prompt("pet adoption", "cart", 1, timestamp=TS, rng=random.Random(0))
    for element in PAGE_COMPONENTS["cart"]["elements"]:
        assert f"  - {element}" in prompt


def test_layout_cycles_through_approaches_with_tuning():
    tuning = TUNING.modifier("minimal")
    for variation in (1, 2, 5, 6, 7):
        prompt = build_page_prompt("bakery", "home", variation, tuning_modifier=tuning, timestamp=TS)
        expected = LAYOUT_APPROACHES[(variation - 1) % len(LAYOUT_APPROACHES)]
        assert f"LAYOUT APPROACH FOR THIS VARIATION:\n{expected}" in prompt


def test_presentation_format_cycles_by_variation():
    for variation in (1, 4, 6):
        prompt = build_page_prompt("bakery", "home", variation, timestamp=TS, rng=random.Random(0))
        expected = PRESENTATION_FORMATS[(variation - 1) % len(PRESENTATION_FORMATS)]
        assert f"Render this design as a {expected}." in prompt


def test_style_order_indexes_by_variation_without_tuning():
    style_order = list(reversed(DESIGN_STYLES))
    prompts = [
        build_page_prompt("bakery", "home", variation, timestamp=TS, style_order=style_order)
        for variation in (1, 2, 3)
    ]
    for variation, prompt in enumerate(prompts, 1):
        assert f"LAYOUT APPROACH FOR THIS VARIATION:\n{style_order[variation - 1]}" in prompt
    assert len(set(prompts)) == 3


def test_seeded_rng_makes_prompt_reproducible():
    first = build_page_prompt("bakery", "blog", 2, timestamp=TS, rng=random.Random(42))
    second = build_page_prompt("bakery", "blog", 2, timestamp=TS, rng=random.Random(42))
    assert first == second


def test_component_prompt_with_type_and_style():
    prompt = build_component_prompt(
        "/tmp/staged/button.png", "button", None, 2,
        style_modifier=VARIATION_STYLES.modifier("material"),
        palette_modifier="Use the following custom color palette: teal",
        timestamp=TS,
    )
    assert prompt.startswith(f"/generate button_v2_{TS} Create ONE single component design variation 2")
    assert "REFERENCE IMAGE: /tmp/staged/button.png" in prompt
    assert "COMPONENT TYPE: Button/CTA" in prompt
    assert "FOCUS AREAS FOR THIS COMPONENT:" in prompt
    assert "DESIGN STYLE (MANDATORY):" in prompt
    assert prompt.index("DESIGN STYLE (MANDATORY):") < prompt.index("COLOR PALETTE (MANDATORY):")
    assert f"Save this variation as: button_redesign-this-compon_{TS}_v2.png" in prompt


def test_component_prompt_with_description_only():
    prompt = build_component_prompt("/tmp/x.png", None, "primary CTA button", 1, timestamp=TS)
    assert "COMPONENT DESCRIPTION: primary CTA button" in prompt
    assert "COMPONENT TYPE:" not in prompt
    assert "DESIGN APPROACH:" in prompt
    assert "COLOR PALETTE" not in prompt
    assert f"Save this variation as: component_var_{TS}_v1.png" in prompt


def test_reference_analysis_prompt_points_at_image():
    prompt = build_reference_analysis_prompt("/tmp/staged/ref.png")
    assert prompt.startswith("Analyze this image in complete detail @/tmp/staged/ref.png")
    for section in ("1. LAYOUT & COMPOSITION:", "2. VISUAL DESIGN:", "3. UI ELEMENTS:",
                    "4. DESIGN DETAILS:", "5. CONTENT STRUCTURE:"):
        assert section in prompt
