"""Shared utilities: logging."""

from bilifav.utils.logger import setup_logger

__all__ = ["setup_logger"]
