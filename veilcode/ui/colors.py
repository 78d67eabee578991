"""Theme colors and color utilities for the UI."""


class VeilColors:
    """Dark parchment-and-ink palette."""

    BG_TOP = "#10131c"
    BG_MIDDLE = "#161b27"
    BG_BOTTOM = "#1d2433"

    INK = "#f5f5f5"
    INK_MUTED = "#9aa3b5"

    ACCENT = "#c9a25c"
    ACCENT_LIGHT = "#e3c88f"
    ACCENT_DARK = "#8a6a30"

    SUCCESS = "#5fd3a5"
    ERROR = "#f2766b"
    LOCKED = "#4a5266"

    CARD_BG = "rgba(255, 255, 255, 0.06)"
    CARD_BG_HOVER = "rgba(255, 255, 255, 0.10)"
    CARD_BORDER = "rgba(255, 255, 255, 0.14)"

    SLOT_BG = "#222a3b"
    SLOT_ACTIVE = "#c9a25c"
    STAR_FILLED = "#f5c451"
    STAR_EMPTY = "#3a4154"

    # Level map card colors, cycled by level index.
    LEVEL_PALETTE = ("#3b6fb6", "#7c4dbe", "#b5534b", "#2f8f7a", "#a9772f", "#4d79ff")


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def format_time(seconds: float) -> str:
    """``m:ss`` display of a completion time."""
    total = max(0, int(seconds))
    return f"{total // 60}:{total % 60:02d}"
