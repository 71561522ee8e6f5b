"""Root conftest: shared test configuration."""

import os

# Ensure tests never point at a real upstream
os.environ.setdefault("EMPLOYEES_ENDPOINT", "http://upstream.test/api/v1/employee")
os.environ.setdefault("LOG_FORMAT", "text")
