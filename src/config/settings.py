# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for solver tuning, oracle selection and logging.
Every field maps to an upper-case environment variable of the same name
(e.g. ``DETECTION_MAX_ITERATIONS=100``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Community detection ===
    detection_max_iterations: int = 50
    detection_epsilon: float = 1e-8
    detection_move_evaluation: Literal["incremental", "recompute"] = "incremental"
    check_modularity_bounds: bool = False

    # === Ordering ===
    community_order: Literal["ascending", "descending"] = "ascending"
    node_order: Literal["ascending", "descending"] = "ascending"
    random_seed: int | None = 42

    # === Repair ===
    repair_enabled: bool = True
    repair_threshold: float = 0.75
    repair_max_flips: int = 5

    # === Ground truth ===
    oracle: Literal["none", "brute_force", "minisat"] = "none"
    oracle_max_variables: int = 20

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("detection_max_iterations", "oracle_max_variables")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:  # noqa: N805
        if v < 1:
            raise ValueError(f"{info.field_name} must be >= 1")
        return v

    @field_validator("detection_epsilon")
    @classmethod
    def validate_epsilon(cls, v: float) -> float:  # noqa: N805
        if v < 0:
            raise ValueError("detection_epsilon must be >= 0")
        return v

    @field_validator("repair_max_flips")
    @classmethod
    def validate_max_flips(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("repair_max_flips must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if not 0.0 <= self.repair_threshold <= 1.0:
            errors.append(
                f"REPAIR_THRESHOLD must be within [0, 1], got {self.repair_threshold}"
            )

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-solve config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
