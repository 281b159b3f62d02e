"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- JSON file reading/writing
- JSON-Schema conformance validation (jsonschema)
- Configuration loading (YAML)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import StudioConfig, load_studio_config, load_studio_config_or_default
from infrastructure.conformance import ConformanceValidator, validate_against_schema

__all__ = [
    # Conformance
    "ConformanceValidator",
    "validate_against_schema",
    # Configuration (most commonly used)
    "load_studio_config",
    "load_studio_config_or_default",
    "StudioConfig",
]
