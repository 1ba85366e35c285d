import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    # Repeated calls replace our handler instead of adding another
    for handler in list(root.handlers):
        if getattr(handler, "_resume_analyzer", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._resume_analyzer = True
    root.addHandler(handler)
