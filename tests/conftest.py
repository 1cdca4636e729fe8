"""Pytest configuration: project root on sys.path and the file-free Moshier backend."""

import os
import sys

import pytest

os.environ.setdefault("EPHEMERIS_BACKEND", "moseph")

# Ensure project root is on sys.path so that
# imports like `from kundali_api...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fakes import FakeEphemeris  # noqa: E402


@pytest.fixture
def fake_eph():
    return FakeEphemeris()
