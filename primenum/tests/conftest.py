"""Unit tests configuration file."""

import os

import pytest

GENERATOR_TESTS_DIR = os.path.join(os.path.dirname(os.path.realpath(__file__)), "generator")


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def sample_definition():
    """Text of the sample enum definition used across generator tests."""
    with open(os.path.join(GENERATOR_TESTS_DIR, "sample.enum"), encoding="utf-8") as f:
        return f.read()
