"""Root conftest — shared test configuration."""

import os

# Human-readable logs when a test fails; no .env values leak into tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
