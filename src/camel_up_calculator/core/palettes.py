from typing import NamedTuple

from camel_up_calculator.core.types import DISPLAY_NAMES, Color


class CamelPalette(NamedTuple):
    background: str
    foreground: str = "#000000"


CAMEL_PALETTES: dict[Color, CamelPalette] = {
    Color.RED: CamelPalette("#e41a1c"),  # Red
    Color.YELLOW: CamelPalette("#ffd92f"),  # Yellow
    Color.BLUE: CamelPalette("#377eb8"),  # Blue
    Color.GREEN: CamelPalette("#4daf4a"),  # Green
    Color.PURPLE: CamelPalette("#984ea3"),  # Magenta-ish purple
    Color.WHITE: CamelPalette("#ffffff"),  # White
    Color.BLACK: CamelPalette("#555555", "#ffffff"),  # Dark grey, white text
}

_PALETTES_BY_NAME: dict[str, CamelPalette] = {
    DISPLAY_NAMES[color]: palette for color, palette in CAMEL_PALETTES.items()
}


# --- HELPER FUNCTIONS ---
def get_camel_palette(camel: Color | str) -> CamelPalette:
    if isinstance(camel, Color):
        return CAMEL_PALETTES[camel]
    return _PALETTES_BY_NAME[camel]


def get_camel_style(camel: Color | str) -> str:
    """Rich style string, e.g. ``"#000000 on #e41a1c"``."""
    palette = get_camel_palette(camel)
    return f"{palette.foreground} on {palette.background}"
