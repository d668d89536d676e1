"""
Logger Configuration Module

Handles logging setup for research operations.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from strands.telemetry import StrandsTelemetry

from .settings import Settings, get_settings

# Load environment variables from .env file
load_dotenv()

# Initialize Strands telemetry for logging
strands_telemetry = StrandsTelemetry()
if "OTEL_EXPORTER_OTLP_ENDPOINT" in os.environ:
    strands_telemetry.setup_otlp_exporter()


def attach_file_handler(
    logger: logging.Logger, path: Path, formatter: logging.Formatter
) -> None:
    """Attach a file handler for path unless the logger already writes there."""
    target = os.path.abspath(path)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def create_logger(
    log_dir: str | None = None, settings: Settings | None = None
) -> logging.Logger:
    """
    Route analyzer (strands) and research logs to files under the log directory.

    Args:
        log_dir: Directory for log files (defaults to settings.log_dir)
        settings: Settings to read the directory and research log level from

    Returns:
        The "research" logger
    """
    settings = settings or get_settings()
    log_path = Path(log_dir or settings.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    strands_logger = logging.getLogger("strands")
    strands_logger.setLevel(logging.DEBUG)
    attach_file_handler(
        strands_logger,
        log_path / "strands_agents.log",
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"),
    )

    research_logger = logging.getLogger("research")
    research_logger.setLevel(settings.log_level)
    attach_file_handler(
        research_logger,
        log_path / "research_results.log",
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
    )

    return research_logger


research_logger: logging.Logger | None = None


def setup_logging(log_dir: str | None = None) -> logging.Logger:
    global research_logger
    if research_logger is None:
        research_logger = create_logger(log_dir)
    return research_logger
