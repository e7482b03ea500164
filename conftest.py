# conftest.py
import dataclasses

import pytest

from pycellarrays.core.settings import SETTINGS


@pytest.fixture(autouse=True)
def restore_settings():
    """Tests may flip the global switches; put them back afterwards."""
    saved = dataclasses.replace(SETTINGS)
    yield SETTINGS
    for f in dataclasses.fields(SETTINGS):
        setattr(SETTINGS, f.name, getattr(saved, f.name))
