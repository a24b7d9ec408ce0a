"""
Test suite for binkit.

Contains:
- tests/unit/      : example-based tests per module
- tests/property/  : Hypothesis property tests
- tests/fixtures/  : small config files used by the unit tests
"""
