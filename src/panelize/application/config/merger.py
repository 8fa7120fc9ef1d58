"""Configuration merging for CLI override support.

Precedence is CLI args > config values > defaults. Only CLI arguments that
are not None override configuration values.
"""

from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from panelize.application.config.loader import validation_error
from panelize.application.config.schema import PanelizeConfiguration


def merge_config_with_cli(
    config: PanelizeConfiguration,
    *,
    scale: float | None = None,
    noise_threshold: float | None = None,
    catalog_source: str | Path | None = None,
    workers: int | None = None,
    output_path: str | Path | None = None,
    output_format: str | None = None,
) -> PanelizeConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base PanelizeConfiguration to merge with
        scale: Override for detection.scale
        noise_threshold: Override for detection.noise_threshold
        catalog_source: Override for the catalog; replaces any inline panels
        workers: Override for layout.workers
        output_path: Override for output.path
        output_format: Override for output.format

    Returns:
        A new, revalidated PanelizeConfiguration with merged values

    Raises:
        ConfigError: If an override is out of range.

    Example:
        >>> merged = merge_config_with_cli(config, scale=0.05)
        >>> merged.detection.scale
        0.05
    """
    data = config.model_dump(mode="json")

    detection = data["detection"]
    if scale is not None:
        detection["scale"] = scale
    if noise_threshold is not None:
        detection["noise_threshold"] = noise_threshold

    if catalog_source is not None:
        data["catalog"] = {"source": str(catalog_source)}

    if workers is not None:
        data["layout"]["workers"] = workers

    output = data["output"]
    if output_path is not None:
        output["path"] = str(output_path)
    if output_format is not None:
        output["format"] = output_format

    try:
        return PanelizeConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise validation_error(e)
