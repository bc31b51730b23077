# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argsy."""
import logging

logger = logging.getLogger("argsy")
