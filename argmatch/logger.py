# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Module-level logger shared by every argmatch component."""
import logging

logger: logging.Logger = logging.getLogger("argmatch")
