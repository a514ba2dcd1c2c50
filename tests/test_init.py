"""Tests for clamav_probe.__init__ exports."""

import clamav_probe


def test_all_exports():
    for name in clamav_probe.__all__:
        assert hasattr(clamav_probe, name)


def test_version():
    assert clamav_probe.__version__.count(".") == 2
