# Core package initialization
# Configuration, logging, errors and HTTP helpers shared by every layer

from . import api_utils, config, exceptions

__all__ = [
    "api_utils",
    "config",
    "exceptions",
]
