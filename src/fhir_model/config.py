"""Model configuration settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes")


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """Process-wide switches for construction-time validation."""

    # Resolve the resource type in Reference.reference / Reference.type and
    # compare it with the element's allowed targets.
    check_reference_types: bool = True

    # Reject control characters below 0x20 (other than tab, CR, LF) in
    # string, code and uri values.
    check_control_chars: bool = True

    @classmethod
    def from_env(cls) -> ModelConfig:
        """Load configuration from environment variables."""
        return cls(
            check_reference_types=os.getenv("FHIR_MODEL_CHECK_REFERENCE_TYPES", "true").lower()
            in _TRUE_VALUES,
            check_control_chars=os.getenv("FHIR_MODEL_CHECK_CONTROL_CHARS", "true").lower()
            in _TRUE_VALUES,
        )


# Global config instance
_config: ModelConfig | None = None


def get_config() -> ModelConfig:
    """Get the global configuration instance, loading it on first use."""
    global _config
    if _config is None:
        _config = ModelConfig.from_env()
        logger.debug("Loaded model configuration: %s", _config)
    return _config


def set_config(config: ModelConfig) -> None:
    """Replace the global configuration instance."""
    global _config
    _config = config
    logger.debug("Model configuration set: %s", config)


def reset_config() -> None:
    """Drop the global instance so the next get_config() reloads from the environment."""
    global _config
    _config = None
