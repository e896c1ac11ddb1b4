"""Shared fixtures: headless matplotlib and an in-memory FIT file stand-in."""
import matplotlib

matplotlib.use("Agg")

import pytest

import training_tracker.fit_parser as fit_parser


class FakeField:
    def __init__(self, name, value):
        self.name = name
        self.value = value


class FakeFitFile:
    """Mimics the subset of ``fitparse.FitFile`` used by the reader."""

    messages = {}

    def __init__(self, path):
        self.path = path
        self.parsed = False

    def parse(self):
        self.parsed = True

    def get_messages(self, name):
        for values in self.messages.get(name, []):
            yield [FakeField(key, value) for key, value in values.items()]


@pytest.fixture
def fake_fit(monkeypatch):
    """Patch the FIT reader and return a setter for the file's messages."""

    def _install(**messages):
        FakeFitFile.messages = messages
        monkeypatch.setattr(fit_parser, "FitFile", FakeFitFile)

    yield _install
    FakeFitFile.messages = {}
