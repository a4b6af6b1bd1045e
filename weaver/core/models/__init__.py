"""
Pydantic models for weaver.
"""

from .base import WeaverBaseModel
from .config import (
    ConfigBaseModel,
    ExecutionConfig,
    FailurePolicy,
    LoggingConfig,
    LogLevel,
    WeaverConfig,
)

__all__ = [
    "ConfigBaseModel",
    "ExecutionConfig",
    "FailurePolicy",
    "LogLevel",
    "LoggingConfig",
    "WeaverBaseModel",
    "WeaverConfig",
]
