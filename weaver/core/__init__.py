"""
Core infrastructure for weaver.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for collaborators
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .container import ServiceContainer, get_container, resolve, try_resolve
from .exceptions import (
    BinaryNotFoundError,
    ConfigFileError,
    ConfigValidationError,
    InvalidArgumentError,
    ProcessExecutionError,
    ProcessTimeoutError,
    WeaverConfigError,
    WeaverException,
    WeaverExecutionError,
    WeaverValidationError,
)

__all__ = [
    "BinaryNotFoundError",
    "ConfigFileError",
    "ConfigValidationError",
    "InvalidArgumentError",
    "ProcessExecutionError",
    "ProcessTimeoutError",
    "ServiceContainer",
    "WeaverConfigError",
    "WeaverException",
    "WeaverExecutionError",
    "WeaverValidationError",
    "bootstrap",
    "get_container",
    "reset",
    "resolve",
    "try_resolve",
]
