# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for progopts."""
import logging

logger: logging.Logger = logging.getLogger("progopts")
