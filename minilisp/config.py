from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
DEFAULT_MAX_DEPTH = 300
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_PROMPT = '> '


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", var, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %d", var, raw, default)
        return default
    return value


def level_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw:
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r: unknown log level, using %s", var, raw, default)
        return default
    return level


@dataclass
class Config:
    """Session settings.

    `max_depth` bounds evaluation nesting, not user calls: every nested
    evaluate spends one unit, so an ordinary non-tail recursion such as
    `(+ n (f (- n 1)))` under an `if` costs about three units per call and
    reaches roughly `max_depth // 3` call levels.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    prelude_paths: List[Path] = field(default_factory=list)
    log_level: str = DEFAULT_LOG_LEVEL
    prompt: str = DEFAULT_PROMPT


def load_config() -> Config:
    """Build a Config from MINILISP_* environment variables."""
    return Config(
        max_depth=int_from_env('MINILISP_MAX_DEPTH', DEFAULT_MAX_DEPTH),
        prelude_paths=paths_from_env('MINILISP_PRELUDE_PATH', []),
        log_level=level_from_env('MINILISP_LOG_LEVEL', DEFAULT_LOG_LEVEL),
        prompt=os.environ.get('MINILISP_PROMPT', DEFAULT_PROMPT),
    )
