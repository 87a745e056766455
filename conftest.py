# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Root conftest.py so app_logger is importable without installing it."""

import sys
from pathlib import Path

# Add repo root to sys.path so the app_logger package can be imported
_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
