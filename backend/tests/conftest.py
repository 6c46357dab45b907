"""Root conftest: shared test configuration."""

import os

# Human-readable logs in test output
os.environ.setdefault("MAPCATALOG_LOG_FORMAT", "text")
