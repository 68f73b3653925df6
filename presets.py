"""
Design preset catalogs
Tuning, platform and component variation-style presets plus the lookup
helpers shared by every catalog (including the colour palettes).
"""

from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from rich.console import Console


class ResolvedPreset(NamedTuple):
    """A preset key or free text resolved to the text that goes into a prompt."""
    key: str
    name: str
    modifier: str
    custom: bool


class PresetCatalog:
    """
    Read-only view over a preset table.

    Args:
        title: Heading printed above the listing
        presets: Mapping of key -> {"name", "description", "promptModifier"}
        custom_template: Format string used for unrecognised keys, with a
            single ``{}`` placeholder for the user's text
        groups: Optional ordered (heading, keys) pairs used by ``list_all``
        key_width: Column width for keys in the listing
    """

    def __init__(
        self,
        title: str,
        presets: Dict[str, Dict[str, str]],
        custom_template: str,
        groups: Optional[Sequence[Tuple[str, Sequence[str]]]] = None,
        key_width: int = 15,
    ):
        self.title = title
        self.presets = presets
        self.custom_template = custom_template
        self.groups = groups
        self.key_width = key_width

    def __contains__(self, key: str) -> bool:
        return key in self.presets

    def keys(self) -> List[str]:
        return list(self.presets)

    def resolve(self, key_or_text: str) -> ResolvedPreset:
        if key_or_text in self.presets:
            preset = self.presets[key_or_text]
            return ResolvedPreset(key_or_text, preset["name"], preset["promptModifier"], False)
        return ResolvedPreset(key_or_text, "Custom", self.custom_template.format(key_or_text), True)

    def modifier(self, key_or_text: str) -> str:
        """Return the stored modifier for a known key, else the wrapped custom text."""
        return self.resolve(key_or_text).modifier

    def display_name(self, key_or_text: str) -> str:
        return self.resolve(key_or_text).name

    def choices(self) -> List[Tuple[str, str]]:
        """(key, "Name - description") pairs in table order, for interactive menus."""
        return [
            (key, f"{preset['name']} - {preset['description']}")
            for key, preset in self.presets.items()
        ]

    def list_all(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        console.print(f"\n{self.title}\n", markup=False, highlight=False)

        groups = self.groups or [(None, self.keys())]
        for heading, keys in groups:
            if heading:
                console.print(f"{heading}:", markup=False, highlight=False)
            for key in keys:
                print_entry(console, key, self.presets[key]["name"],
                            self.presets[key]["description"], self.key_width)


def print_entry(console: Console, key: str, name: str, description: str, key_width: int) -> None:
    console.print(f"  {key.ljust(key_width)} - {name}", markup=False, highlight=False)
    console.print(f"  {' ' * (key_width + 3)}{description}\n", markup=False, highlight=False)


TUNING_PRESETS: Dict[str, Dict[str, str]] = {
    "creative": {
        "name": "Creative & Artistic",
        "description": "Experimental layouts, bold colors, unique visual elements",
        "promptModifier": "Push creative boundaries with experimental layouts, bold color choices, artistic visual elements, and unconventional design patterns. Prioritize visual impact and memorable aesthetics over traditional conventions.",
    },
    "professional": {
        "name": "Professional & Corporate",
        "description": "Clean, trustworthy, business-focused designs",
        "promptModifier": "Create professional, corporate-focused designs with clean layouts, trustworthy aesthetics, conservative color palettes, structured grids, and business-appropriate visual language. Emphasize credibility and professionalism.",
    },
    "minimal": {
        "name": "Minimalist & Clean",
        "description": "Maximum whitespace, simple typography, restrained design",
        "promptModifier": "Embrace minimalism with abundant whitespace, simple typography, restrained color palettes (mostly monochrome with 1-2 accent colors), clean lines, and focus on content hierarchy. Less is more.",
    },
    "vibrant": {
        "name": "Vibrant & Energetic",
        "description": "Bold colors, dynamic layouts, high energy",
        "promptModifier": "Design with vibrant, saturated colors, dynamic layouts, energetic visual rhythms, playful elements, and high-contrast designs that grab attention and convey excitement and vitality.",
    },
    "elegant": {
        "name": "Elegant & Sophisticated",
        "description": "Refined typography, subtle details, luxury feel",
        "promptModifier": "Create elegant, sophisticated designs with refined serif typography, subtle textures and details, muted color palettes, generous spacing, and a premium, luxury aesthetic that conveys quality and refinement.",
    },
    "modern": {
        "name": "Modern & Trendy",
        "description": "Latest design trends, contemporary aesthetics",
        "promptModifier": "Incorporate the latest web design trends: glassmorphism, neumorphism, gradient meshes, 3D elements, micro-interactions, bold typography, and contemporary design patterns that feel cutting-edge and current.",
    },
    "playful": {
        "name": "Playful & Fun",
        "description": "Friendly, approachable, lighthearted designs",
        "promptModifier": "Design with a playful, fun aesthetic using rounded shapes, friendly illustrations, cheerful colors, approachable typography, and lighthearted visual elements that create a warm, welcoming experience.",
    },
    "dark": {
        "name": "Dark Mode Focused",
        "description": "Dark backgrounds, dramatic contrast, modern feel",
        "promptModifier": "Design primarily in dark mode with dark backgrounds, dramatic contrast, luminous accent colors, subtle gradients, and modern dark UI patterns. Create depth through layering and subtle shadows.",
    },
    "brutalist": {
        "name": "Brutalist & Raw",
        "description": "Raw aesthetics, stark layouts, unconventional",
        "promptModifier": "Embrace brutalist design principles with raw, unpolished aesthetics, stark layouts, monospace fonts, high contrast, minimal styling, exposed grid systems, and intentionally unconventional design choices.",
    },
    "luxe": {
        "name": "Luxury & Premium",
        "description": "High-end feel, sophisticated details, exclusive vibe",
        "promptModifier": "Create luxury, premium designs with high-end aesthetics, sophisticated details, elegant typography, rich color palettes (gold, deep jewel tones), ample negative space, and an exclusive, refined visual language.",
    },
    "tech": {
        "name": "Tech & Futuristic",
        "description": "Cutting-edge, sci-fi inspired, digital-first",
        "promptModifier": "Design with a futuristic, tech-forward aesthetic using sci-fi inspired elements, digital effects, neon accents, geometric patterns, holographic gradients, and a cutting-edge visual language.",
    },
    "organic": {
        "name": "Organic & Natural",
        "description": "Nature-inspired, flowing shapes, earthy tones",
        "promptModifier": "Create organic, nature-inspired designs with flowing curves, natural shapes, earthy color palettes, botanical elements, hand-crafted aesthetics, and visual language inspired by the natural world.",
    },
    "retro": {
        "name": "Retro & Vintage",
        "description": "Nostalgic aesthetics, vintage typography, classic layouts",
        "promptModifier": "Design with retro, vintage aesthetics featuring nostalgic color schemes, classic typography styles (70s/80s/90s era), vintage layout patterns, and design elements that evoke specific historical periods.",
    },
    "editorial": {
        "name": "Editorial & Magazine-Style",
        "description": "Typography-focused, grid-based, publishing aesthetic",
        "promptModifier": "Create editorial, magazine-style designs with strong typographic hierarchy, grid-based layouts, large compelling imagery, pull quotes, sophisticated white space usage, and publishing-inspired visual language.",
    },
    "accessible": {
        "name": "Accessibility Focused",
        "description": "High contrast, clear hierarchy, inclusive design",
        "promptModifier": "Prioritize accessibility with high contrast ratios, clear visual hierarchy, large touch targets, readable typography at all sizes, inclusive color choices, and designs that work well for users with diverse abilities.",
    },
}

PLATFORM_PRESETS: Dict[str, Dict[str, str]] = {
    "website": {
        "name": "Website (Desktop)",
        "description": "Traditional desktop website design",
        "promptModifier": "Design for desktop/laptop screens with standard website conventions. Use typical desktop resolutions (1920x1080, 1440x900). Include full navigation, multiple columns where appropriate, and desktop-optimized layouts.",
    },
    "mobile": {
        "name": "Mobile App",
        "description": "Native mobile application interface",
        "promptModifier": "Design as a native mobile app interface (iOS/Android style). Use mobile app conventions: bottom navigation, card-based layouts, gesture indicators, mobile-optimized typography, and portrait orientation. Screen size should be typical smartphone dimensions (375x812 or similar).",
    },
    "tablet": {
        "name": "Tablet App",
        "description": "Tablet application interface",
        "promptModifier": "Design for tablet devices with app conventions. Use tablet-optimized layouts that take advantage of the larger screen while maintaining touch-friendly interactions. Consider both portrait and landscape orientations. Screen size around 768x1024 or 1024x768.",
    },
    "watch": {
        "name": "Smartwatch App",
        "description": "Smartwatch/wearable interface",
        "promptModifier": "Design for smartwatch/wearable devices. Use circular or square watch face conventions. Extremely simplified UI with large touch targets, minimal text, prominent icons, glanceable information, and single-focus screens. Size around 368x448 or similar watch dimensions.",
    },
    "tv": {
        "name": "TV/Streaming App",
        "description": "Smart TV or streaming device interface",
        "promptModifier": "Design for TV/streaming platforms (Apple TV, Roku, Fire TV style). Use TV conventions: large text readable from distance, focus states for remote control navigation, horizontal carousels, cinematic imagery, and 16:9 aspect ratio (1920x1080).",
    },
    "desktop": {
        "name": "Desktop Application",
        "description": "Native desktop software interface",
        "promptModifier": "Design as a native desktop application (macOS/Windows style). Use desktop app conventions: menu bars, toolbars, sidebars, multi-panel layouts, keyboard shortcuts indicators, and desktop-specific UI patterns.",
    },
    "pwa": {
        "name": "Progressive Web App",
        "description": "Progressive web application",
        "promptModifier": "Design as a Progressive Web App that works across devices. Combine web and app conventions with responsive design, app-like navigation, offline indicators, and installation prompts. Should feel native while being web-based.",
    },
    "kiosk": {
        "name": "Kiosk Interface",
        "description": "Public kiosk or terminal display",
        "promptModifier": "Design for public kiosk/terminal use. Use large touch targets, high contrast, simple navigation, timeout warnings, accessibility features, and clear 'start over' options. Consider standing-distance viewing.",
    },
    "car": {
        "name": "Car/Automotive Display",
        "description": "In-vehicle infotainment system",
        "promptModifier": "Design for automotive displays (CarPlay/Android Auto style). Prioritize glanceability, large buttons, voice control indicators, minimal distraction, high contrast for sunlight readability, and landscape orientation.",
    },
    "vr": {
        "name": "VR/Spatial Interface",
        "description": "Virtual reality or spatial computing",
        "promptModifier": "Design for VR or spatial computing (Quest, Vision Pro style). Use 3D spatial conventions, depth, floating panels, gaze-based or hand-tracking interactions, and immersive environment considerations.",
    },
}

VARIATION_PRESETS: Dict[str, Dict[str, str]] = {
    "material": {
        "name": "Material Design",
        "description": "Google's Material Design system principles",
        "promptModifier": "Redesign this component following Material Design principles: elevated surfaces with shadows, bold colors with proper contrast, ripple effects for interactions, rounded corners (4-8px), floating action buttons, and Material Design's elevation system.",
    },
    "ios": {
        "name": "iOS/Apple Design",
        "description": "Apple's Human Interface Guidelines style",
        "promptModifier": "Redesign this component following iOS/Apple design principles: subtle shadows and depth, San Francisco font style, translucent backgrounds with blur effects, simple borders (1px), iOS-style switches and controls, clean white space, and native iOS component patterns.",
    },
    "fluent": {
        "name": "Fluent Design (Microsoft)",
        "description": "Microsoft's Fluent Design System",
        "promptModifier": "Redesign this component following Fluent Design System: acrylic materials with blur and transparency, reveal highlights on hover, depth and parallax effects, subtle animations, modern Segoe UI font style, and Microsoft's design language.",
    },
    "neumorphism": {
        "name": "Neumorphic/Soft UI",
        "description": "Soft, extruded UI elements with subtle shadows",
        "promptModifier": "Redesign this component using neumorphism/soft UI: soft shadows creating embossed or extruded effects, subtle depth with inner and outer shadows, same-colored backgrounds and elements, minimal contrast, soft color palette, and tactile appearance.",
    },
    "glassmorphism": {
        "name": "Glassmorphic/Frosted Glass",
        "description": "Transparent, blurred glass-like effects",
        "promptModifier": "Redesign this component using glassmorphism: frosted glass effect with backdrop blur, semi-transparent backgrounds (rgba with 10-40% opacity), subtle borders (1px with low opacity white), soft shadows, and vivid background colors showing through.",
    },
    "minimal": {
        "name": "Minimalist",
        "description": "Ultra-clean with maximum simplicity",
        "promptModifier": "Redesign this component with minimalist principles: remove all unnecessary elements, use simple black/white/gray palette with one accent color, thin borders or no borders, ample white space, simple sans-serif typography, and focus on content over decoration.",
    },
    "bold": {
        "name": "Bold & Vibrant",
        "description": "High contrast with vivid colors",
        "promptModifier": "Redesign this component with bold, vibrant styling: saturated colors with high contrast, thick borders (2-4px), large typography, strong shadows for depth, chunky buttons and controls, and eye-catching visual presence.",
    },
    "outlined": {
        "name": "Outlined/Wireframe",
        "description": "Border-focused with outlined elements",
        "promptModifier": "Redesign this component using outlined style: prominent borders (2-3px) on all elements, minimal or no fill colors (mostly white/transparent backgrounds), outlined icons, border-based visual hierarchy, and clean line-based aesthetic.",
    },
    "gradient": {
        "name": "Gradient Heavy",
        "description": "Rich gradients and color transitions",
        "promptModifier": "Redesign this component with gradient-heavy styling: vibrant color gradients as primary design element, smooth color transitions, gradient overlays on images, gradient borders or shadows, and colorful, modern aesthetic.",
    },
    "brutalist": {
        "name": "Brutalist/Raw",
        "description": "Harsh, unpolished, unconventional design",
        "promptModifier": "Redesign this component with brutalist principles: raw, unpolished aesthetic, stark black and white or high contrast colors, thick borders and geometric shapes, monospace or unconventional fonts, asymmetric layouts, and intentionally rough appearance.",
    },
    "retro": {
        "name": "Retro/Vintage",
        "description": "Nostalgic design from past eras",
        "promptModifier": "Redesign this component with retro/vintage styling: nostalgic color palettes (70s/80s/90s inspired), vintage typography, pixelated or low-fi elements, retro patterns or textures, and design elements that evoke specific historical periods.",
    },
    "flat": {
        "name": "Flat Design 2.0",
        "description": "Flat colors with subtle depth cues",
        "promptModifier": "Redesign this component with flat design 2.0: flat colors without gradients, minimal shadows (if any, very subtle), simple shapes and clean edges, bright or pastel color palettes, crisp typography, but with subtle depth cues like light shadows or layering.",
    },
    "skeuomorphic": {
        "name": "Skeuomorphic/Realistic",
        "description": "Real-world textures and realistic styling",
        "promptModifier": "Redesign this component with skeuomorphic styling: realistic textures and materials (leather, wood, metal), detailed shadows and highlights mimicking real objects, dimensional appearance with depth, glossy or textured surfaces, and design that mimics physical counterparts.",
    },
    "neon": {
        "name": "Neon/Cyberpunk",
        "description": "Glowing neon effects with dark backgrounds",
        "promptModifier": "Redesign this component with neon/cyberpunk aesthetic: dark or black backgrounds, bright neon colors (cyan, magenta, green, yellow), glowing effects on text and borders, high contrast, futuristic typography, and synthwave-inspired visual style.",
    },
    "organic": {
        "name": "Organic/Rounded",
        "description": "Soft, flowing shapes inspired by nature",
        "promptModifier": "Redesign this component with organic styling: rounded, flowing shapes with large border radius, soft shadows, curved edges throughout, natural color palettes (earth tones, pastels), blob-like forms, and nature-inspired aesthetic.",
    },
    "geometric": {
        "name": "Geometric/Angular",
        "description": "Sharp angles and geometric patterns",
        "promptModifier": "Redesign this component with geometric styling: sharp angles and corners (minimal border radius), geometric shapes and patterns, triangular or hexagonal elements, precise alignments, mathematical proportions, and angular design language.",
    },
    "colorful": {
        "name": "Maximalist Colors",
        "description": "Multiple vibrant colors and playful design",
        "promptModifier": "Redesign this component with maximalist color approach: use multiple vibrant colors throughout, playful color combinations, colorful borders and dividers, rainbow gradients, color-coded sections, and joyful, energetic color palette.",
    },
    "monochrome": {
        "name": "Monochromatic",
        "description": "Single color with variations in shade",
        "promptModifier": "Redesign this component using monochromatic color scheme: choose one base color and use only variations of that color (tints, shades, tones), create hierarchy through different intensities of the same hue, minimal use of black/white, and cohesive single-color aesthetic.",
    },
    "elegant": {
        "name": "Elegant/Luxury",
        "description": "Sophisticated with premium feel",
        "promptModifier": "Redesign this component with elegant, luxury styling: sophisticated color palette (black, white, gold, deep jewel tones), serif or refined fonts, generous white space, subtle animations, thin borders or delicate dividers, and premium, high-end appearance.",
    },
    "playful": {
        "name": "Playful/Friendly",
        "description": "Fun, approachable, whimsical design",
        "promptModifier": "Redesign this component with playful, friendly styling: rounded shapes with large border radius, cheerful colors (bright but not harsh), friendly illustrations or icons, asymmetric layouts, fun micro-interactions, and warm, approachable aesthetic.",
    },
}

TUNING = PresetCatalog(
    "📐 Available Tuning Presets:",
    TUNING_PRESETS,
    "Apply the following design direction: {}",
)

PLATFORMS = PresetCatalog(
    "📱 Available Platform Presets:",
    PLATFORM_PRESETS,
    "Design for the following platform/context: {}",
    key_width=12,
)

VARIATION_STYLES = PresetCatalog(
    "🎭 Available Variation Presets:",
    VARIATION_PRESETS,
    "Redesign this component with the following direction: {}",
    groups=[
        ("Design Systems", ["material", "ios", "fluent"]),
        ("Modern Styles", ["neumorphism", "glassmorphism", "minimal", "flat"]),
        ("Visual Treatments", ["bold", "outlined", "gradient", "neon"]),
        ("Shape & Form", ["organic", "geometric", "skeuomorphic", "brutalist"]),
        ("Color Approaches", ["colorful", "monochrome", "retro"]),
        ("Personality", ["elegant", "playful"]),
    ],
    key_width=20,
)
