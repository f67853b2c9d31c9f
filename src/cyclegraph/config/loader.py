from __future__ import annotations

from typing import Any

from dynaconf import Dynaconf

from cyclegraph.config.constants import DEFAULTS
from cyclegraph.config.settings import (
    CycleGraphConfig,
    GraphConfig,
    OwnershipStrategy,
    TraversalConfig,
)

_TRAVERSAL_MODES = ("iterative", "recursive")


def _settings() -> Dynaconf:
    return Dynaconf(
        envvar_prefix="CYCLEGRAPH",
        load_dotenv=True,
        settings_files=[],
    )


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    if isinstance(value, int):
        return bool(value)
    raise ValueError(f"not a boolean setting: {value!r}")


def load_config() -> CycleGraphConfig:
    """
    Build a CycleGraphConfig from defaults and CYCLEGRAPH_* environment
    variables.

    Raises ValueError for an unknown strategy or traversal mode.
    """
    settings = _settings()

    raw_strategy = settings.get("OWNERSHIP_STRATEGY", DEFAULTS["OWNERSHIP_STRATEGY"])
    raw_strategy = str(raw_strategy).strip().lower()
    try:
        strategy = OwnershipStrategy(raw_strategy)
    except ValueError:
        raise ValueError(f"unknown ownership strategy: {raw_strategy!r}") from None

    mode = settings.get("TRAVERSAL_MODE", DEFAULTS["TRAVERSAL_MODE"])
    mode = str(mode).strip().lower()
    if mode not in _TRAVERSAL_MODES:
        raise ValueError(f"unknown traversal mode: {mode!r}")

    borrow_checks = settings.get("BORROW_CHECKS", DEFAULTS["BORROW_CHECKS"])

    return CycleGraphConfig(
        graph=GraphConfig(
            strategy=strategy,
            borrow_checks=_parse_bool(borrow_checks),
        ),
        traversal=TraversalConfig(mode=mode),
    )
