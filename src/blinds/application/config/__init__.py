"""Configuration schema and loading system for blind frame specifications.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration loader
with comprehensive error handling, and adapters to domain objects.

Public API:
    - BlindConfiguration: Root configuration model
    - FrameConfig: Frame dimensions and covering model
    - CutListConfigSchema: Stock board options model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_parameters / config_to_overrides / config_to_stock_length:
      Convert configuration to domain inputs
    - parameters_to_config: Convert domain parameters back to configuration

Example:
    >>> from pathlib import Path
    >>> from blinds.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-blind.json"))
    ...     print(f"Frame: {config.frame.width}x{config.frame.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from blinds.application.config.adapter import (
    config_to_overrides,
    config_to_parameters,
    config_to_stock_length,
    parameters_to_config,
)
from blinds.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from blinds.application.config.schema import (
    MAX_NAME_LENGTH,
    SUPPORTED_VERSIONS,
    BlindConfiguration,
    CoveringMaterialConfig,
    CutListConfigSchema,
    FrameConfig,
)

__all__ = [
    "BlindConfiguration",
    "ConfigError",
    "CoveringMaterialConfig",
    "CutListConfigSchema",
    "FrameConfig",
    "MAX_NAME_LENGTH",
    "SUPPORTED_VERSIONS",
    "config_to_overrides",
    "config_to_parameters",
    "config_to_stock_length",
    "load_config",
    "load_config_from_dict",
    "parameters_to_config",
]
