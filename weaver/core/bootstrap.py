"""
Application bootstrap for weaver.

Initializes the DI container with the logger, process runner and settings.
Call once at application startup (the CLI does this for every command).
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.logger import ILogger
from .interfaces.process import IProcessRunner
from .settings import WeaverSettings, load_settings

_initialized = False


def bootstrap(
    settings: WeaverSettings | None = None,
    config_path: Path | None = None,
) -> ServiceContainer:
    """
    Bootstrap the weaver application.

    Args:
        settings: Pre-loaded settings (loaded from config/env when omitted)
        config_path: Explicit config file used when settings are loaded here

    Returns:
        Initialized ServiceContainer
    """
    global _initialized

    container = get_container()

    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path)

    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: WeaverSettings) -> None:
    """Register core application services."""
    from ..services.logging import WeaverLogger
    from ..services.process import SubprocessRunner

    container.register_singleton(WeaverSettings, implementation=settings)

    def create_logger() -> ILogger:
        return WeaverLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        )

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]

    def create_runner() -> IProcessRunner:
        return SubprocessRunner(
            bin_dir=settings.execution.bin_dir,
            timeout=settings.execution.timeout,
        )

    container.register_singleton(IProcessRunner, factory=create_runner)  # type: ignore[type-abstract]


def reset() -> None:
    """
    Reset the application state.

    Useful for testing to ensure clean state between tests.
    """
    global _initialized
    ServiceContainer.reset()
    _initialized = False

