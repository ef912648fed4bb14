"""Cross-cutting utilities (lowest dependency layer).

This package provides:
    - Read-only YAML access to bundled files (fs)
    - Logging setup for embedding applications (logging_config)

No module in utils/ may import from the rest of colortool.

Convenience imports:
    from colortool.utils import fs
    from colortool.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config

from .logging_config import get_logger, pop_context, push_context, setup_logging, shutdown

__all__ = [
    'fs',
    'logging_config',
    'setup_logging',
    'get_logger',
    'push_context',
    'pop_context',
    'shutdown',
]
