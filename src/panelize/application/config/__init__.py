"""Configuration schema and loading for panelization runs.

Public API:
    - PanelizeConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides
    - config_to_request / config_to_catalog: Convert to DTOs and domain objects
    - validate_config: Run advisory checks on a loaded configuration

Example:
    >>> from pathlib import Path
    >>> from panelize.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("floor1.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from panelize.application.config.adapter import (
    config_to_catalog,
    config_to_request,
    config_to_shapes,
    resolve_catalog_path,
)
from panelize.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from panelize.application.config.merger import merge_config_with_cli
from panelize.application.config.schema import (
    SUPPORTED_VERSIONS,
    CatalogConfig,
    DetectionConfig,
    LayoutConfig,
    OutputConfig,
    PanelConfig,
    PanelizeConfiguration,
    WallShapeConfig,
)
from panelize.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_catalog_advisories,
    check_wall_advisories,
    validate_config,
)

__all__ = [
    # Schema
    "CatalogConfig",
    "DetectionConfig",
    "LayoutConfig",
    "OutputConfig",
    "PanelConfig",
    "PanelizeConfiguration",
    "SUPPORTED_VERSIONS",
    "WallShapeConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    # Adapters
    "config_to_catalog",
    "config_to_request",
    "config_to_shapes",
    "resolve_catalog_path",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_catalog_advisories",
    "check_wall_advisories",
    "validate_config",
]
