# flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagparse."""
import logging

logger: logging.Logger = logging.getLogger("flagparse")
