import os

from .config import CORS_ORIGINS, DB_CONFIG, DB_POOL_SIZE, DB_POOL_TIMEOUT, HOST, LOG_FORMAT, PORT  # noqa: F401

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
