"""
Page and component metadata
Page kinds with their required UI elements, component types with the areas a
redesign should explore, and the generic style/layout phrases used to
diversify unstyled variations.
"""

from typing import Dict, List, Optional

from rich.console import Console

from presets import print_entry

PAGE_COMPONENTS: Dict[str, Dict] = {
    "home": {
        "name": "homepage",
        "description": "Main landing page with hero and featured content",
        "elements": [
            "prominent hero section with large headline and call-to-action",
            "primary navigation bar with logo placement and menu items",
            "featured content grid showcasing key offerings with imagery",
            "trust indicators or social proof section",
            "value proposition highlights in cards or columns",
            "prominent search or filtering interface",
            "footer with sitemap, contact info, and secondary links",
        ],
    },
    "about": {
        "name": "about page",
        "description": "Company story, team, and mission",
        "elements": [
            "header navigation matching site structure",
            "company story or mission statement section with imagery",
            "team member profiles with photos and descriptions",
            "timeline or milestone visualization",
            "values or culture showcase in visual format",
            "statistics or achievements display",
            "contact information or office location section",
            "footer consistent with site design",
        ],
    },
    "product": {
        "name": "product detail page",
        "description": "Individual product detail page",
        "elements": [
            "breadcrumb navigation trail",
            "large product image gallery with thumbnails",
            "product title, price, and rating display",
            "detailed description and specifications section",
            "prominent 'Add to Cart' or purchase button",
            "quantity selector and size/variant options",
            "related products or recommendations carousel",
            "customer reviews and ratings section",
            "shipping and return policy information",
        ],
    },
    "cart": {
        "name": "shopping cart page",
        "description": "Shopping cart with items and checkout",
        "elements": [
            "simplified header navigation",
            "itemized list of cart contents with product images",
            "quantity adjusters for each item",
            "price breakdown showing subtotal, tax, shipping",
            "promo code or discount input field",
            "prominent checkout button",
            "estimated delivery information",
            "recommended products or upsells section",
            "security badges and payment method icons",
        ],
    },
    "contact": {
        "name": "contact page",
        "description": "Contact form and information",
        "elements": [
            "page header with contact heading",
            "contact form with name, email, subject, message fields",
            "contact information display (phone, email, address)",
            "embedded map showing location",
            "social media links and icons",
            "business hours information",
            "alternative contact methods",
            "FAQ or common inquiries section",
        ],
    },
    "sales": {
        "name": "sales landing page",
        "description": "Marketing/sales landing page with conversion focus",
        "elements": [
            "attention-grabbing headline with unique selling proposition",
            "hero image or video showcasing the offer",
            "benefit-focused bullet points or feature highlights",
            "social proof section with testimonials and reviews",
            "pricing table with package comparison",
            "urgency indicators (countdown timer, limited availability)",
            "multiple strategically-placed call-to-action buttons",
            "money-back guarantee or risk reversal section",
            "FAQ addressing common objections",
            "final call-to-action before footer",
        ],
    },
    "blog": {
        "name": "blog listing page",
        "description": "Blog listing or article feed",
        "elements": [
            "header with blog title and navigation",
            "featured article highlight at top",
            "grid or list of article cards with thumbnails",
            "article preview text and metadata (date, author, category)",
            "sidebar with categories, tags, and search",
            "pagination or infinite scroll controls",
            "newsletter signup form",
            "popular or trending posts section",
        ],
    },
}

PAGE_TYPES: List[str] = list(PAGE_COMPONENTS)

COMPONENT_TYPES: Dict[str, Dict] = {
    "button": {
        "name": "Button/CTA",
        "description": "Primary, secondary, or tertiary action buttons",
        "focusAreas": [
            "button shape, border radius, and sizing",
            "text treatment, font weight, and case (uppercase, sentence case)",
            "hover and active states with visual feedback",
            "icon placement and spacing (left, right, icon-only)",
            "color scheme for different button states (primary, secondary, disabled)",
            "padding and internal spacing for text and icons",
            "shadow, border, or outline treatments",
        ],
    },
    "card": {
        "name": "Card Component",
        "description": "Content cards with image, text, and actions",
        "focusAreas": [
            "card layout structure (vertical, horizontal, media placement)",
            "image aspect ratios and treatment",
            "content hierarchy (title, description, metadata)",
            "spacing and padding within the card",
            "hover states and elevation changes",
            "action placement (buttons, links at bottom or overlay)",
            "border, shadow, and background treatments",
        ],
    },
    "form": {
        "name": "Form Input",
        "description": "Text inputs, selects, textareas, and form controls",
        "focusAreas": [
            "input field styling (borders, backgrounds, fills)",
            "label positioning (floating, above, inline)",
            "placeholder text treatment",
            "focus states with clear visual indicators",
            "error and validation message styling",
            "helper text and character counter placement",
            "icon integration (prefix, suffix icons)",
        ],
    },
    "nav": {
        "name": "Navigation Menu",
        "description": "Navigation bars, menus, and navigation components",
        "focusAreas": [
            "navigation layout (horizontal, vertical, hamburger)",
            "menu item styling and spacing",
            "active/current page indicators",
            "hover and focus states for links",
            "dropdown or submenu treatments",
            "logo placement and sizing",
            "mobile responsive hamburger menu design",
        ],
    },
    "modal": {
        "name": "Modal/Dialog",
        "description": "Modal dialogs, popups, and overlays",
        "focusAreas": [
            "modal sizing and positioning on screen",
            "header, body, and footer sections",
            "close button placement and styling",
            "backdrop/overlay treatment",
            "content padding and spacing",
            "action button placement (right-aligned, spread, centered)",
            "entry and exit animation suggestions",
        ],
    },
    "table": {
        "name": "Data Table",
        "description": "Tables for displaying structured data",
        "focusAreas": [
            "header row styling and emphasis",
            "cell padding and alignment",
            "row striping or hover states",
            "sort indicators for sortable columns",
            "action column with icons or buttons",
            "responsive table approach (scroll, cards, collapse)",
            "border treatments between cells and rows",
        ],
    },
    "list": {
        "name": "List Item",
        "description": "List items for vertical lists or feeds",
        "focusAreas": [
            "list item layout structure",
            "avatar or icon placement and sizing",
            "primary and secondary text hierarchy",
            "metadata and timestamp placement",
            "action buttons or menu placement (right side, overlay)",
            "divider or separator treatment between items",
            "hover and selected states",
        ],
    },
    "header": {
        "name": "Page Header",
        "description": "Hero sections, page headers, or banners",
        "focusAreas": [
            "headline typography and hierarchy",
            "subheading and supporting text treatment",
            "CTA button placement and prominence",
            "background treatment (solid, gradient, image)",
            "content alignment (centered, left-aligned)",
            "spacing and vertical rhythm",
            "image or illustration integration",
        ],
    },
    "footer": {
        "name": "Footer Section",
        "description": "Site footer with links and information",
        "focusAreas": [
            "column structure and link organization",
            "social media icon styling and placement",
            "newsletter signup integration",
            "copyright and legal text treatment",
            "logo placement in footer",
            "background color and contrast with page",
            "spacing between footer sections",
        ],
    },
    "badge": {
        "name": "Badge/Tag/Chip",
        "description": "Small status indicators, tags, or labels",
        "focusAreas": [
            "badge shape (rounded, pill, square)",
            "size variations (small, medium, large)",
            "color schemes for different statuses (success, warning, error, info)",
            "icon integration within badge",
            "removable badges with close button",
            "border vs filled vs outlined styles",
            "text treatment and letter spacing",
        ],
    },
    "icon": {
        "name": "Icon Button/Icon",
        "description": "Icon-based controls and indicators",
        "focusAreas": [
            "icon style (outlined, filled, rounded, sharp)",
            "sizing and touch target area",
            "background treatment (circle, square, none)",
            "hover and active states",
            "color schemes for different contexts",
            "shadow or elevation for floating action buttons",
            "badge or notification dot integration",
        ],
    },
    "dropdown": {
        "name": "Dropdown/Select Menu",
        "description": "Dropdown menus and select components",
        "focusAreas": [
            "trigger button styling",
            "dropdown menu positioning and sizing",
            "menu item hover and selected states",
            "dividers between menu sections",
            "icons or checkmarks for selected items",
            "search integration for long lists",
            "shadow and elevation for floating menu",
        ],
    },
    "toggle": {
        "name": "Toggle/Switch/Checkbox",
        "description": "Toggle switches, checkboxes, and radio buttons",
        "focusAreas": [
            "toggle switch shape and sizing",
            "on/off state visual differentiation",
            "animation transition between states",
            "label placement and alignment",
            "disabled state appearance",
            "color schemes for active state",
            "focus ring or outline for accessibility",
        ],
    },
    "toast": {
        "name": "Toast/Notification",
        "description": "Toast messages and notification banners",
        "focusAreas": [
            "notification positioning on screen",
            "icon placement and meaning (success, error, info, warning)",
            "message text hierarchy",
            "action button or dismiss button placement",
            "background color schemes by notification type",
            "shadow and elevation",
            "progress indicator for auto-dismiss timing",
        ],
    },
    "avatar": {
        "name": "Avatar/Profile Picture",
        "description": "User avatars and profile images",
        "focusAreas": [
            "shape variations (circle, rounded square, square)",
            "size variations for different contexts",
            "border and ring treatments",
            "online status indicator placement",
            "placeholder treatment for missing images",
            "badge or icon overlay (verified, premium)",
            "group avatar stacking approach",
        ],
    },
}

# Used when no tuning is given: one is drawn per variation
DESIGN_STYLES: List[str] = [
    "minimalist with lots of whitespace and clean typography",
    "bold and modern with strong geometric shapes and vibrant colors",
    "elegant and sophisticated with serif fonts and subtle textures",
    "playful and energetic with rounded shapes and dynamic layouts",
    "professional and corporate with structured grid and conservative palette",
    "editorial-focused with large typography and magazine-style layout",
    "tech-forward with gradients, glassmorphism, and modern UI patterns",
    "organic and natural with curved shapes and earthy tones",
    "retro-inspired with vintage typography and nostalgic design elements",
    "experimental and artistic with asymmetric layouts and creative compositions",
]

# Used when a tuning is given: cycled by variation index
LAYOUT_APPROACHES: List[str] = [
    "Grid-based layout with structured columns",
    "Asymmetric layout with dynamic content placement",
    "Single-column centered layout with focus on hierarchy",
    "Multi-column magazine-style layout",
    "Card-based modular layout system",
]

PRESENTATION_FORMATS: List[str] = [
    "high-fidelity Figma design mockup with polished UI elements, no browser chrome",
    "realistic website design showing only the webpage content without browser UI",
    "digital wireframe with clean vector shapes and typography, content only",
    "interactive prototype view showing hover states and UI details, no device frame",
    "pixel-perfect web design mockup showing pure website interface",
]


def list_component_types(console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print("\n🧩 Available Component Types:\n", markup=False, highlight=False)
    for key, component in COMPONENT_TYPES.items():
        print_entry(console, key, component["name"], component["description"], 15)


def describe_page_types() -> str:
    """Help-text block listing every page kind with its description."""
    return "\n".join(
        f"  {key.ljust(9)} - {page['description']}" for key, page in PAGE_COMPONENTS.items()
    )
