# Configuration values for the shape surface editor.

WINDOW_TITLE = "Shape Surface"

DEFAULT_SURFACE_SIZE = (1280, 800)

# Entity geometry (sizes are side lengths; entities are square)
DEFAULT_SIZE = 100
MIN_SIZE = 20
MAX_SIZE = 400
SPAWN_SPREAD = 200

SHRINK_FACTOR = 0.9
GROW_FACTOR = 1.1
NUDGE_STEP = 10

PRIMARY_BUTTON = 0

COLORS = [
    "#00F2FF",
    "#00FF9D",
    "#FF007B",
    "#AD00FF",
    "#FFCF00",
]

THEME = {
    "bg": "#1F2125",
    "panel": "#262A30",
    "panel_alt": "#2F343C",
    "text": "#E6E6E6",
    "muted": "#9AA0A6",
    "accent": "#0A84FF",
    "accent_alt": "#64D2FF",
    "active_outline": "#FFFFFF",
    "multi_outline": "#64D2FF",
}

# Toolkit key names mapped onto the canonical names the engine dispatches on.
KEY_ALIASES = {
    "BackSpace": "Backspace",
    "Up": "ArrowUp",
    "Down": "ArrowDown",
    "Left": "ArrowLeft",
    "Right": "ArrowRight",
}

DELETE_KEYS = ("Delete", "Backspace")

NUDGE_KEYS = {
    "ArrowUp": (0, -NUDGE_STEP),
    "ArrowDown": (0, NUDGE_STEP),
    "ArrowLeft": (-NUDGE_STEP, 0),
    "ArrowRight": (NUDGE_STEP, 0),
}

REMOVAL_ANIMATION_MS = 400
REMOVAL_FRAMES = 12
REMOVAL_TIMEOUT_S = 2.0
REMOVAL_SWEEP_MS = 500

INSTRUCTIONS = (
    "Surface Drag: Multi-select\n"
    "Object Drag: Move single or group\n"
    "Backspace/Del: Delete selected\n"
    "Double-Click: Delete one shape\n"
    "Arrows: Nudge selected shape\n"
    "Wheel: Resize shapes\n"
    "Right-Click: Morph shape"
)
