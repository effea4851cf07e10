"""Core constants used across tabular modules.

This module centralizes reserved identifiers and configuration names.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

CONSTANT_COLUMN = "~constant"
Y_COLUMN = "~Y"
LOG_LEVEL_ENV_VAR = "TABULAR_LOG_LEVEL"
CHECK_ITERATION_MUTATION_ENV_VAR = "TABULAR_CHECK_ITERATION_MUTATION"
DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
TRUTHY_FLAG_VALUES = ("1", "true", "yes", "on")
FALSY_FLAG_VALUES = ("0", "false", "no", "off")
