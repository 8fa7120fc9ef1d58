"""Reading layout config files.

Whatever goes wrong is raised as a ConfigError. Its ``error_type`` names the
stage that failed and its ``details`` point at the offending value, so the
CLI can print one line per problem.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from panelize.application.config.schema import PanelizeConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A layout config that cannot be read or does not validate.

    Attributes:
        message: Printable summary.
        error_type: file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: Config file the error came from, if any.
        details: One dict per problem. JSON errors carry line, column and
            message; validation errors carry path, message, value and
            error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
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


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Dotted path of a pydantic error location, e.g. ``walls[2].side1``."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path or "(root)"


def validation_error(
    error: PydanticValidationError, path: Path | None = None
) -> ConfigError:
    """Wrap a pydantic ValidationError with one detail per failing setting."""
    details = [
        {
            "path": _json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]

    source = f" in {path}" if path is not None else ""
    lines = [f"{len(details)} invalid setting(s){source}:"]
    for detail in details:
        line = f"  {detail['path']}: {detail['message']}"
        value = detail["value"]
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got {value!r})"
        lines.append(line)

    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"No permission to read config file {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Cannot read config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        )


def _parse_json(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"{path} is not valid JSON: {e.msg} at line {e.lineno}, column {e.colno}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config_from_dict(
    data: dict[str, Any], path: Path | None = None
) -> PanelizeConfiguration:
    """Validate already-parsed config data.

    Args:
        data: Parsed JSON object.
        path: File the data came from, used in error messages only.

    Raises:
        ConfigError: With error_type "validation" if the data does not match
            the schema.
    """
    try:
        return PanelizeConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise validation_error(e, path)


def load_config(path: Path) -> PanelizeConfiguration:
    """Read, parse and validate a layout config file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not JSON, or
            fails schema validation. ``error_type`` tells which.
    """
    config = load_config_from_dict(_parse_json(_read_text(path), path), path=path)
    logger.debug("Loaded config %s with %d wall shape(s)", path, len(config.walls))
    return config
