import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `modules.strings`) works during pytest collection regardless
# of the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from infrastructure.services.providers import get_settings
from modules.strings.service import get_catalog_service


@pytest.fixture(autouse=True)
def reset_cached_providers():
    """Drop cached settings and services so environment overrides apply."""
    get_settings.cache_clear()
    get_catalog_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog_service.cache_clear()
