# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argyle CLI applications."""
import logging

logger: logging.Logger = logging.getLogger("argyle")
