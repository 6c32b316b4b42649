"""Loading of blind configuration files.

A configuration file holds one JSON object describing a named frame. Every
way loading can fail ends in a ConfigError whose ``error_type`` tells the
CLI how to present it:

- ``file_not_found``: the path does not exist
- ``file_read_error``: the path exists but is not readable UTF-8 text
- ``json_parse``: the text is not JSON, or its root is not an object
- ``validation``: the object does not describe a buildable blind
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from blinds.application.config.schema import BlindConfiguration

# Added by pydantic to messages raised inside our own validators
_VALUE_ERROR_PREFIX = "Value error, "


class ConfigError(Exception):
    """A blind configuration could not be loaded.

    Attributes:
        message: Human readable summary.
        error_type: file_not_found, file_read_error, json_parse or validation.
        path: File the configuration came from; None for in-memory data.
        details: One dict per problem. JSON problems carry ``line``,
            ``column`` and ``message``; validation problems carry ``path``,
            ``message`` and ``value``.
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


def _location(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location, e.g. ``frame.width`` or ``overrides[2]``."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def _problem(error: dict[str, Any]) -> dict[str, Any]:
    message = error["msg"]
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX) :]
    return {
        "path": _location(error["loc"]),
        "message": message,
        "value": error.get("input"),
    }


def _summary(source: str, problems: list[dict[str, Any]]) -> str:
    lines = [f"Invalid blind configuration in {source}:"]
    for problem in problems:
        lines.append(f"  - {problem['path'] or '(root)'}: {problem['message']}")
    return "\n".join(lines)


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}", "file_not_found", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read config file {path}: {e}", "file_read_error", path
        ) from e


def _parse_object(content: str, path: Path) -> dict[str, Any]:
    """Parse JSON text that must hold exactly one blind object."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    if not isinstance(data, dict):
        kind = type(data).__name__
        raise ConfigError(
            f"{path} must hold a JSON object describing one blind, not {kind}",
            "json_parse",
            path,
            [{"line": 1, "column": 1, "message": f"Expected an object, got {kind}"}],
        )
    return data


def load_config_from_dict(
    data: dict[str, Any],
    path: Path | None = None,
) -> BlindConfiguration:
    """Validate a configuration dictionary.

    Args:
        data: Decoded configuration object.
        path: File the data was read from, used in error messages.

    Raises:
        ConfigError: With error_type "validation", listing every problem.
    """
    try:
        return BlindConfiguration.model_validate(data)
    except ValidationError as e:
        problems = [_problem(error) for error in e.errors()]
        source = str(path) if path is not None else "configuration data"
        raise ConfigError(
            _summary(source, problems), "validation", path, problems
        ) from e


def load_config(path: Path) -> BlindConfiguration:
    """Load and validate a blind configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not a JSON object,
            or not a valid blind configuration.
    """
    return load_config_from_dict(_parse_object(_read_text(path), path), path)
