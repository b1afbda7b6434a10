"""Viewer configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Environment variables read by the CLI
ENV_FILE = "TERM_RESUME_FILE"
ENV_SPEED = "TERM_RESUME_SPEED"
ENV_LOG = "TERM_RESUME_LOG"

# Seconds between typed units of the banner
TYPING_INTERVAL = 0.02

# Seconds to wait for input when nothing else is scheduled
POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class ViewerConfig:
    """Options for an interactive session."""
    content_path: Optional[Path] = None
    banner: bool = True
    speed: float = TYPING_INTERVAL
    poll_interval: float = POLL_INTERVAL
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.speed < 0:
            raise ValueError(f"speed must be >= 0, got {self.speed}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")


def configure_logging(log_file: Optional[Path]) -> None:
    """Send log records to ``log_file``; the screen belongs to the viewer."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
