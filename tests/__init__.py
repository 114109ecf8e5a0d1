"""
Tests package for css_sides_lib.

This package contains unit tests for all library components.
Tests need no external objects or fixtures beyond pytest.

Run all tests:
    python -m pytest tests/ -v
"""
