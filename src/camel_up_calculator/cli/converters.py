from __future__ import annotations

from typing import TYPE_CHECKING, get_args

import cappa
import msgspec

from camel_up_calculator.core.errors import LayoutParseError
from camel_up_calculator.core.types import DieId
from camel_up_calculator.engine.board import parse_layout_tokens
from camel_up_calculator.simulation.config import ScenarioConfig

if TYPE_CHECKING:
    from pathlib import Path

VALID_DIE_IDS = frozenset(get_args(DieId))


def validate_dice_ids(value: str) -> str:
    """Accept ``"gP"`` style strings made of known die ids."""
    normalized = value.strip().lower()
    unknown = sorted(set(normalized) - VALID_DIE_IDS)
    if unknown:
        msg = (
            f"Unknown dice id(s) {', '.join(unknown)} in '{value}'. "
            f"Valid ids: {', '.join(sorted(VALID_DIE_IDS))}."
        )
        raise cappa.Exit(msg, code=1)
    return normalized


def validate_layout(value: list[str]) -> list[str]:
    """Check ``index:camels`` entries early so cappa reports a clean error."""
    try:
        _ = parse_layout_tokens(value)
    except LayoutParseError as e:
        raise cappa.Exit(str(e), code=1) from e
    return value


def load_scenario(
    config_file: Path | None,
    layout: list[str] | None,
    without: str | None,
    only: str | None,
    ignore_trailing: int | None,
) -> ScenarioConfig:
    """Scenario file first, then CLI overrides on top."""
    scenario = ScenarioConfig()

    if config_file is not None:
        if not config_file.exists():
            msg = f"Config file not found: {config_file}"
            raise cappa.Exit(msg, code=1)
        try:
            scenario = ScenarioConfig.from_toml(config_file)
        except msgspec.DecodeError as e:
            msg = f"Invalid TOML config: {e}"
            raise cappa.Exit(msg, code=1) from e

    if layout:
        scenario.layout = layout
    if without is not None:
        scenario.used_dice = without
        scenario.available_dice = None
    if only is not None:
        scenario.available_dice = only
    if ignore_trailing is not None:
        scenario.ignore_trailing = ignore_trailing

    if scenario.ignore_trailing < 0:
        msg = f"--ignore-trailing must be >= 0, got {scenario.ignore_trailing}"
        raise cappa.Exit(msg, code=1)

    return scenario
