# utils/logging_config.py
import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging() -> None:
     """Attach a single stream handler to the root logger."""
     root = logging.getLogger()

     # Avoid duplicate handlers in dev reload
     if root.handlers:
          return

     level = os.getenv("LOG_LEVEL", "INFO").upper()
     root.setLevel(getattr(logging, level, logging.INFO))

     stream_handler = logging.StreamHandler()
     stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
     root.addHandler(stream_handler)
