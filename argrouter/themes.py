# Argrouter CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Colour constants and the rich theme shared by Argrouter output."""
from rich.theme import Theme


class OneColors:
    """One Dark inspired colour names usable as rich styles."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"

    CYAN_b = f"bold {CYAN}"
    BLUE_b = f"bold {BLUE}"
    GREEN_b = f"bold {GREEN}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    """Return the rich theme used by the shared console."""
    return Theme(
        {
            "usage": OneColors.BLUE_b,
            "command": OneColors.CYAN_b,
            "option": OneColors.LIGHT_YELLOW,
            "error": OneColors.DARK_RED_b,
            "warning": OneColors.LIGHT_YELLOW,
            "muted": OneColors.COMMENT_GREY,
            "version": OneColors.GREEN_b,
        }
    )
