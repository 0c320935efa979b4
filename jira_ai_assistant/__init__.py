from __future__ import annotations

__version__ = "1.4.2"
__name__ = "jira_ai_assistant"

import os
from pathlib import Path

from chromatrace import LoggingConfig, LoggingSettings


DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level="DEBUG",
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level="DEBUG",
        file_path="logs.log",
        enable_file_logging=True,
        max_bytes=10 * 1024 * 1024,
        backup_count=50,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "LOGGER", "DEFAULT_PATH"]
