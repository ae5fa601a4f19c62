"""Tests for the top-level numtol exports."""

import numtol


def test_all_exports_resolve():
    for name in numtol.__all__:
        assert getattr(numtol, name) is not None


def test_core_operations_through_package_namespace():
    assert numtol.is_in_range(5.0, 1e-9, "[0,10)") is True
    assert numtol.mround(7.0, 2.0) == 8.0
    assert numtol.magnitude(0.0034) == -3
    assert numtol.sign(0.0) == 1.0
    assert numtol.equals_auto_tol(100.0, 100.00009) is True


def test_exported_functions_are_documented():
    undocumented = [
        name
        for name in numtol.__all__
        if callable(getattr(numtol, name)) and not (getattr(numtol, name).__doc__ or "").strip()
    ]
    assert undocumented == []
