"""
Copyright (c) 2020, the Decred developers
See LICENSE for details
"""

import sys

import pytest

from opsuccess import helpers


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def noArgs(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["opsuccess"])
