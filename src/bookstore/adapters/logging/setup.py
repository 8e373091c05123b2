"""lib_log_rich runtime setup for bookstore.

The root CLI group calls :func:`init_logging` with the loaded configuration
before any command runs. Records go to stderr, so stdout only ever carries
the formatted book line or command output.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from bookstore import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` configuration section.

    Keys other than ``service`` and ``environment`` are kept and handed to
    ``RuntimeConfig`` as keyword arguments.

    Example:
        >>> LoggingConfigModel().service
        'bookstore'
        >>> LoggingConfigModel(environment="staging", console_level="DEBUG").model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str = __init__conf__.name
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section = config.get("lib_log_rich", default=None) or {}
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section))
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service,
        environment=parsed.environment,
        **(parsed.model_extra or {}),
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich from ``config`` unless it is already running.

    ``.env`` files are read first so ``LOG_*`` variables apply, and stdlib
    ``logging`` is bridged into the runtime afterwards.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
