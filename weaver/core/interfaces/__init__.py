"""
Interface definitions for weaver's collaborators.

Builders depend on these abstractions so the logger, the process runner
and the failure policy can be injected.
"""

from .logger import ILogger
from .process import IFailureHandler, IProcessRunner, ProcessResult

__all__ = [
    "IFailureHandler",
    "ILogger",
    "IProcessRunner",
    "ProcessResult",
]
