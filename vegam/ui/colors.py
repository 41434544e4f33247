"""Theme colors and color utilities for the UI."""


class TypingColors:
    """Light theme palette for the typing test screen."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"
    MINT = "#69f0ae"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    # Word window
    WORD_CORRECT = "#2e7d32"
    WORD_CURRENT_BG = "#b2ebf2"
    WORD_UPCOMING = "#546e7a"


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


def timer_color(remaining_seconds: int, duration: int) -> str:
    """Shift the countdown from teal towards coral as time runs out."""
    if duration <= 0:
        return TypingColors.CORAL
    used = 1.0 - max(0, remaining_seconds) / duration
    return blend_hex(TypingColors.PRIMARY, TypingColors.CORAL, used)
