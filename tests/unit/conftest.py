"""Shared fixtures for unit tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_im_env(monkeypatch):
    """Keep RELAYKIT_IM_* variables from the outer shell out of ClientConfig."""
    for name in list(os.environ):
        if name.upper().startswith("RELAYKIT_IM_"):
            monkeypatch.delenv(name)
