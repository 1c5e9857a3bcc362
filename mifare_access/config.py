"""Application configuration."""

import os

# HTTP service
API_HOST = os.getenv("MIFARE_ACCESS_HOST", "0.0.0.0")
API_PORT = int(os.getenv("MIFARE_ACCESS_PORT", "8000"))

LOG_LEVEL = os.getenv("MIFARE_ACCESS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
