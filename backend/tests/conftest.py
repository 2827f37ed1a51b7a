"""Root conftest — shared test configuration."""

import os

# Keep test log output readable and independent of a developer .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
