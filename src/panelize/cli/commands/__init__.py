"""CLI command implementations for the panelize application.

This package contains subcommands for the panelize CLI:
- validate: Validate a configuration file
- catalog: Show a panel catalog and its scan order
"""

from panelize.cli.commands.catalog import catalog_command
from panelize.cli.commands.validate import display_config_error, validate_command

__all__ = ["catalog_command", "display_config_error", "validate_command"]
