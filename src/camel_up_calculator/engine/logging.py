from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, get_args, override

from rich.highlighter import Highlighter
from rich.logging import RichHandler

from camel_up_calculator.core import LOGGER_NAME
from camel_up_calculator.core.palettes import get_camel_palette
from camel_up_calculator.core.types import CamelName

if TYPE_CHECKING:
    from rich.text import Text

CAMEL_NAMES = set(get_args(CamelName))

# --- PATTERNS ---
CAMEL_PATTERN = re.compile(rf"\b(?P<name>{'|'.join(map(re.escape, CAMEL_NAMES))})\b")

COLOR = {
    "move": "bold #23d18b",  # light green
    "bump": "bold #d670d6",  # magenta
    "warning": "bold bright_red",
    "count": "bold #29b8db",  # cyan
}


class CalculatorLogHighlighter(Highlighter):
    @override
    def highlight(self, text: Text) -> None:
        text.highlight_regex(r"\bMove\b", COLOR["move"])
        text.highlight_regex(r"\bBUMP\b", COLOR["bump"])
        text.highlight_regex(r"\b\d+ sequences\b", COLOR["count"])
        text.highlight_regex(r"!!!", COLOR["warning"])

        # Camel names in their own colour
        for match in CAMEL_PATTERN.finditer(text.plain):
            start, end = match.span("name")
            text.stylize(
                f"bold {get_camel_palette(match.group('name')).background}",
                start=start,
                end=end,
            )


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    handler = RichHandler(
        markup=False,
        show_path=False,
        show_time=False,
        highlighter=CalculatorLogHighlighter(),
    )
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
