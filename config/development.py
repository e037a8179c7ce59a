import os

from .config import CORS_ORIGINS, DB_CONFIG, DB_POOL_SIZE, DB_POOL_TIMEOUT, LOG_FORMAT, PORT  # noqa: F401

# Debugger is on here, so only listen on loopback unless HOST says otherwise.
HOST = os.getenv("HOST", "127.0.0.1")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
