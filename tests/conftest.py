# tests/conftest.py
"""
Global test bootstrap
- Required env (JWT secret, no file logging) set BEFORE any app import
- Pulls in the app, auth and fake-ODM fixtures
"""

import os

# ──────────────────────────────────────────────────────────────────────────────
# 🌱 Test env
#   NOTE: These are set BEFORE importing the app/fixtures so they take effect.
# ──────────────────────────────────────────────────────────────────────────────
os.environ.setdefault("JWT_SECRET", "test-secret-key")
os.environ.setdefault("LOG_TO_FILE", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# ──────────────────────────────────────────────────────────────────────────────
# 📦 Pull in the rest of the fixtures (app, auth)
# ──────────────────────────────────────────────────────────────────────────────
from tests.fixtures.app import *   # noqa: F401,F403,E402
from tests.fixtures.auth import *  # noqa: F401,F403,E402
