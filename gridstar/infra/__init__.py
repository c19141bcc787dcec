"""Process-wide infrastructure helpers."""

from gridstar.infra.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
