from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CssbuildConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact output

    def __post_init__(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level!r}. Must be one of {_LOG_LEVELS}"
            )
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0, got {self.json_indent}")

    @classmethod
    def from_env(cls) -> CssbuildConfig:
        """Create config from ``CSSBUILD_*`` environment variables.

        Recognised:
            - ``CSSBUILD_LOG_LEVEL``
            - ``CSSBUILD_JSON_INDENT`` (integer; empty means compact)
        """
        indent = os.environ.get("CSSBUILD_JSON_INDENT", "")
        return cls(
            log_level=os.environ.get("CSSBUILD_LOG_LEVEL", "WARNING"),
            json_indent=int(indent) if indent else None,
        )


def configure_logging(config: CssbuildConfig) -> logging.Logger:
    """Set the level of the ``cssbuild`` logger.

    A stderr handler is installed on the root logger only when nothing else
    has configured logging yet.
    """
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("cssbuild")
    log.setLevel(config.log_level.upper())
    return log
