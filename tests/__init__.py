"""
Badge Registrar Test Suite
==========================

Test organization:
- tests/unit/          - Unit tests (mock gateway, no network access)

Run tests:
    pytest                          # All tests
    pytest tests/unit/test_poller.py
"""
