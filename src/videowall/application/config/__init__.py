"""Request file configuration for wall size calculations.

Public API:
    - CalculationConfiguration: Root request model
    - InputsConfig: The two target parameters
    - load_config: Load a request from a JSON file
    - load_config_from_dict: Load a request from a dictionary
    - config_to_input: Convert a request to a CalculationInput
    - ConfigError: Exception for request file errors

Example:
    >>> from pathlib import Path
    >>> from videowall.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("lobby-wall.json"))
    ...     print(f"Cabinet type: {config.cabinet_type}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from videowall.application.config.loader import (
    ConfigError,
    config_to_input,
    load_config,
    load_config_from_dict,
)
from videowall.application.config.schema import (
    SUPPORTED_VERSIONS,
    CalculationConfiguration,
    InputsConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CalculationConfiguration",
    "ConfigError",
    "InputsConfig",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
]
