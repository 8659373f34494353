"""Loading of JSON calculation request files.

A request file holds one calculation: cabinet type, unit and the two target
parameters. Every way a request can fail to load (missing or unreadable
file, broken JSON, a value outside the request schema) is reported as a
ConfigError naming the request field at fault.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from videowall.application.config.schema import CalculationConfiguration
from videowall.application.dtos import CalculationInput

# Prefix pydantic puts on messages raised by our own validators
_VALUE_ERROR_PREFIX = "Value error, "


class ConfigError(Exception):
    """Exception raised when a calculation request cannot be loaded.

    Attributes:
        message: Human readable summary
        error_type: file_not_found, permission_denied, file_read_error,
            json_parse or validation
        path: Request file, when the request came from disk
        details: For json_parse, the line and column of the syntax error.
            For validation, one entry per rejected field with its dotted
            path (e.g. "inputs.height"), message and offending value.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """One detail per rejected request field."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        message = err["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        details.append(
            {
                "path": ".".join(str(part) for part in err["loc"]),
                "message": message,
                "value": err.get("input"),
            }
        )
    return details


def _invalid_request(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    details = _field_errors(error)
    source = f"Request file {path}" if path is not None else "Calculation request"
    lines = [f"{source} is invalid:"]
    for detail in details:
        field = detail["path"] or "(request)"
        value = detail["value"]
        if isinstance(value, (int, float, str)):
            lines.append(f"  - {field}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {field}: {detail['message']}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def load_config(path: Path) -> CalculationConfiguration:
    """Load and validate a calculation request file.

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or does not
            describe a valid calculation.
    """
    if not path.exists():
        raise ConfigError(f"Request file not found: {path}", "file_not_found", path)

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            f"Permission denied reading request file: {path}", "permission_denied", path
        ) from e
    except OSError as e:
        raise ConfigError(
            f"Could not read request file {path}: {e}", "file_read_error", path
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Request file {path} is not valid JSON "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    try:
        return CalculationConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _invalid_request(e, path) from e


def load_config_from_dict(data: dict[str, Any]) -> CalculationConfiguration:
    """Validate a calculation request that is already parsed."""
    try:
        return CalculationConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _invalid_request(e) from e


def config_to_input(config: CalculationConfiguration) -> CalculationInput:
    """Convert a validated request into the command input DTO."""
    return CalculationInput(
        cabinet_type=config.cabinet_type,
        unit=config.unit.value,
        aspect_ratio=config.inputs.aspect_ratio,
        height=config.inputs.height,
        width=config.inputs.width,
        diagonal=config.inputs.diagonal,
    )
