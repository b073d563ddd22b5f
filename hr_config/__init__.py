"""
hr_config -- single public entrypoint for HR kernel configuration.

Responsibility:
    Provides the one way to obtain configuration at runtime through
    ``get_active_config()``.  Returns a frozen ``HrConfig``.

Architecture position:
    Configuration.  This package sits above ``hr_kernel``; the kernel MUST
    NEVER import from ``hr_config``.  ``hr_config.bridges`` translates the
    configuration into configured kernel services.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``ValueError`` -- a value fails validation.

Audit relevance:
    Every successful ``get_active_config()`` call emits an
    ``hr_config_loaded`` log entry carrying the path and SHA-256 checksum
    of the configuration that was loaded.
"""

from pathlib import Path

from hr_config.loader import load_config
from hr_config.schema import HrConfig
from hr_kernel.logging_config import get_logger

_logger = get_logger("config")

# Shipped defaults
DEFAULT_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"


def get_active_config(path: Path | str | None = None) -> HrConfig:
    """
    Load the active configuration.

    Args:
        path: YAML file to load.  Defaults to hr_config/defaults.yaml.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If configuration validation fails.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config = load_config(config_path)

    _logger.info(
        "hr_config_loaded",
        extra={
            "config_path": str(config_path),
            "checksum": config.checksum,
            "bonus_tier_count": len(config.bonus_tiers),
            "zero_salary_policy": config.salary_history.zero_salary_policy.value,
        },
    )
    return config


__all__ = ["DEFAULT_CONFIG_PATH", "HrConfig", "get_active_config"]
