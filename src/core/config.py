"""Runtime configuration model for tabular datasets.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    CHECK_ITERATION_MUTATION_ENV_VAR,
    DEFAULT_LOG_LEVEL,
    FALSY_FLAG_VALUES,
    LOG_LEVEL_ENV_VAR,
    SUPPORTED_LOG_LEVELS,
    TRUTHY_FLAG_VALUES,
)
from core.errors import TabularConfigError


@dataclass(frozen=True)
class TabularConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level emitted by structured loggers.
        check_iteration_mutation: Whether live record iterators fail
            when the dataset is mutated underneath them.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    check_iteration_mutation: bool = True

    @classmethod
    def from_env(cls) -> "TabularConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TabularConfigError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        check_iteration_mutation = _parse_flag(
            CHECK_ITERATION_MUTATION_ENV_VAR,
            os.getenv(CHECK_ITERATION_MUTATION_ENV_VAR, "true"),
        )
        return cls(
            log_level=log_level,
            check_iteration_mutation=check_iteration_mutation,
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-case level name.

    Raises:
        TabularConfigError: If value is not a supported level.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise TabularConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
        )
    return level


def _parse_flag(env_name: str, raw_value: str) -> bool:
    normalized = raw_value.strip().lower()
    if normalized in TRUTHY_FLAG_VALUES:
        return True
    if normalized in FALSY_FLAG_VALUES:
        return False
    raise TabularConfigError(
        f"Invalid {env_name} value: expected a boolean flag, got '{raw_value}'. "
        f"Use one of {', '.join(TRUTHY_FLAG_VALUES + FALSY_FLAG_VALUES)}."
    )
