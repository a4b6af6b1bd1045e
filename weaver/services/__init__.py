"""
Service implementations for weaver's collaborators.
"""

from .logging import NullLogger, ScopedLogger, WeaverLogger, get_logger
from .process import SubprocessRunner

__all__ = [
    "NullLogger",
    "ScopedLogger",
    "SubprocessRunner",
    "WeaverLogger",
    "get_logger",
]
