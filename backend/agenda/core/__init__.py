# Core package initialization
# Cross-cutting concerns: configuration, logging, errors and API helpers

from . import api_utils, config, exceptions, logging_config

__all__ = [
    "api_utils",
    "config",
    "exceptions",
    "logging_config",
]
