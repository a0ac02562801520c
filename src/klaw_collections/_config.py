"""Library configuration: CollectionsConfig, initialization and the shared RNG."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass

from klaw_collections._logging import configure_logging, get_logger

__all__ = [
    'CollectionsConfig',
    'get_config',
    'get_random',
    'init',
    'reset',
]

logger = get_logger(__name__)

LOG_LEVEL_ENV = 'KLAW_COLLECTIONS_LOG_LEVEL'
SEED_ENV = 'KLAW_COLLECTIONS_SEED'


@dataclass(frozen=True)
class CollectionsConfig:
    """Configuration for klaw-collections.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
        seed: Seed for the random generator used by shuffle(). None = OS entropy.
    """

    log_level: str | None = None
    json_logs: bool = True
    seed: int | None = None


# Global configuration (set by init())
_config: CollectionsConfig | None = None
_random = random.Random()


def _detect_log_level() -> str | None:
    value = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return value.upper() or None


def _detect_seed() -> int | None:
    """Read the shuffle seed from the environment; invalid values are ignored."""
    raw = os.environ.get(SEED_ENV, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning('invalid_seed', env=SEED_ENV, value=raw)
        return None


def init(
    log_level: str | None = None,
    *,
    json_logs: bool = True,
    seed: int | None = None,
) -> CollectionsConfig:
    """Initialize klaw-collections.

    Arguments take priority over the KLAW_COLLECTIONS_LOG_LEVEL and
    KLAW_COLLECTIONS_SEED environment variables.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: If True, emit JSON logs; otherwise console output.
        seed: Seed for shuffle(). None = non-deterministic.

    Returns:
        The CollectionsConfig that was set.

    Example:
        ```python
        from klaw_collections import init, shuffle

        init(seed=7)
        shuffle([1, 2, 3])  # same permutation on every run
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_seed = seed if seed is not None else _detect_seed()

    _config = CollectionsConfig(
        log_level=resolved_level,
        json_logs=json_logs,
        seed=resolved_seed,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    _random.seed(resolved_seed)
    logger.debug('collections_initialized', log_level=resolved_level, seed=resolved_seed)
    return _config


def get_config() -> CollectionsConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-collections not initialized. Call init() first.'
        raise RuntimeError(msg)
    return _config


def get_random() -> random.Random:
    """Return the shared random generator used by shuffle()."""
    return _random


def reset() -> None:
    """Forget the current configuration and reseed the shared generator from OS entropy."""
    global _config  # noqa: PLW0603
    _config = None
    _random.seed(None)
