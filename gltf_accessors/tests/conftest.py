"""Unit tests configuration file."""

import pytest


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


@pytest.fixture
def data_file(tmp_path):
    """Write raw bytes to a file and return its path as a string."""

    def write(data: bytes, name: str = "data.bin") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return write
