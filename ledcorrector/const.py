"""Constants for the LED color corrector."""

TITLE = "LED Color Corrector"
UNKNOWN_PROFILE_MESSAGE = "Unknown device profile"

DEFAULT_DEVICE = "tl-fans"
DEFAULT_BRAND = "lianli"
DEFAULT_BRIGHTNESS = 100
DEFAULT_MAX_BRIGHTNESS = 100
DEFAULT_COLOR: tuple[int, int, int] = (255, 102, 0)

HEX_COLOR_PATTERN = r"^#?[0-9a-fA-F]{6}$"

CHANNEL_MIN = 0
CHANNEL_MAX = 255

WARM_HUE_RANGE: tuple[int, int] = (0, 90)
COOL_HUE_RANGE: tuple[int, int] = (200, 340)
COOL_HUE_PEAK = 270
COOL_HUE_SPREAD = 70
COOL_BLUE_DAMPING = 0.3
RECONCILE_HUE_THRESHOLD = 2
RECONCILE_SATURATION_THRESHOLD = 5

CATEGORY_RED = "red"
CATEGORY_ORANGE = "orange"
CATEGORY_YELLOW = "yellow"
CATEGORY_GREEN = "green"
CATEGORY_TEAL = "teal"
CATEGORY_BLUE = "blue"
CATEGORY_PURPLE = "purple"
CATEGORY_PINK = "pink"

# Upper bound is exclusive; 340..360 wraps back to red.
HUE_CATEGORIES: tuple[tuple[int, int, str], ...] = (
    (0, 15, CATEGORY_RED),
    (15, 45, CATEGORY_ORANGE),
    (45, 70, CATEGORY_YELLOW),
    (70, 150, CATEGORY_GREEN),
    (150, 200, CATEGORY_TEAL),
    (200, 260, CATEGORY_BLUE),
    (260, 310, CATEGORY_PURPLE),
    (310, 340, CATEGORY_PINK),
    (340, 360, CATEGORY_RED),
)

DEFAULT_TIP = "Use the corrected values in your control software to achieve the desired color."
COLOR_TIPS: dict[str, str] = {
    CATEGORY_ORANGE: (
        "For orange colors, the green channel needs significant reduction. "
        "LEDs over-represent green, making orange appear yellow."
    ),
    CATEGORY_YELLOW: (
        "Yellow is tricky because it's created by mixing red and green. "
        "Reduce green substantially and boost red."
    ),
    CATEGORY_PURPLE: (
        "Purple often appears too blue on LEDs. "
        "We reduce the blue channel and shift the hue slightly."
    ),
    CATEGORY_TEAL: (
        "Teal and cyan can appear too green. "
        "We balance the green and blue channels for accuracy."
    ),
    CATEGORY_RED: (
        "Pure red usually displays accurately, "
        "but slight adjustments help maintain vibrancy."
    ),
    CATEGORY_GREEN: "Green LEDs are naturally bright. Consider if you want the full intensity.",
    CATEGORY_BLUE: "Blue typically displays well on LEDs with minimal correction needed.",
    CATEGORY_PINK: "Pink requires careful balancing of red and blue to avoid appearing too magenta.",
}

SOFTWARE_HINT_TEMPLATE = "Enter this value in {software} to get your desired color"
BRIGHTNESS_TIP_TEMPLATE = (
    "💡 For {name}, reducing brightness to ~{percent}% often improves color accuracy"
)
GENERIC_BRIGHTNESS_TIP = "💡 Adjusting brightness can help with color accuracy on some devices"

BRAND_NAMES: dict[str, str] = {
    "lianli": "Lian Li",
    "corsair": "Corsair",
    "nzxt": "NZXT",
    "coolermaster": "Cooler Master",
}

CLIPBOARD_HEX = "hex"
CLIPBOARD_RGB = "rgb"

ENV_DEFAULT_DEVICE = "CORRECTOR_DEFAULT_DEVICE"
ENV_MAX_BRIGHTNESS = "CORRECTOR_MAX_BRIGHTNESS"
ENV_CACHE_SIZE = "CORRECTOR_CACHE_SIZE"
ENV_TELEMETRY_EVENTS = "CORRECTOR_TELEMETRY_EVENTS"
ENV_SERVICE_URL = "CORRECTOR_SERVICE_URL"
DEFAULT_CACHE_SIZE = 256
DEFAULT_TELEMETRY_EVENTS = 50
