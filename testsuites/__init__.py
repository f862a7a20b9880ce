"""
Test suites package.

Kept importable so tests can share the fakes in `testsuites.unit.fakes`
and so `run_tests.py` can target suites by path.
"""
