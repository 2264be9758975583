"""Unit test fixtures.

Flavour and isolation fixtures live in tests/conftest.py.
This file holds sample path data shared by the conversion tests.
"""

import pytest


@pytest.fixture
def windows_prefix_cases() -> list[tuple[str, str]]:
    """(native, slash) pairs whose prefixes must survive a round trip."""
    return [
        (r"C:\foo\bar", "C:/foo/bar"),
        ("C:", "C:"),
        ("C:\\", "C:/"),
        (r"\\?\C:\foo\bar", r"\\?\C:/foo/bar"),
        (r"\\server\share\foo\bar", r"\\server\share/foo/bar"),
        (r"\\server\share", r"\\server\share"),
        (r"\\?\UNC\server\share\foo\bar", r"\\?\UNC\server\share/foo/bar"),
        (r"\\?\UNC\server\share", r"\\?\UNC\server\share"),
    ]
