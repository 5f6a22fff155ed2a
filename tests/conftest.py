"""Test configuration shared by the whole suite."""

import os
from pathlib import Path

# Must be set before the application modules load their configuration
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["APP_CONFIG_FILE"] = str(Path(__file__).parent.parent / "config.yaml")
os.environ["LOG_FILE"] = ""
os.environ["DATABASE_URL"] = "sqlite://"

from tests.fixtures import *  # noqa: E402,F401,F403
