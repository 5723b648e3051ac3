"""CQRS Registry - Single Source of Truth for ajax commands.

Exports the registry metadata types, the registry constant and the computed
views used by routing, the container and drift tests.
"""

# Metadata types
from src.application.cqrs.metadata import CommandMetadata, CQRSCategory

# Registry constants
from src.application.cqrs.registry import AJAX_COMMAND_REGISTRY

# Computed views and helper functions
from src.application.cqrs.computed_views import (
    get_command_metadata,
    get_command_names,
    get_commands_by_category,
    validate_registry_consistency,
)

__all__ = [
    # Metadata types
    "CommandMetadata",
    "CQRSCategory",
    # Registry constants
    "AJAX_COMMAND_REGISTRY",
    # Helper functions
    "get_command_metadata",
    "get_command_names",
    "get_commands_by_category",
    "validate_registry_consistency",
]
