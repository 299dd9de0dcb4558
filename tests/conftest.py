"""Shared pytest configuration for the levelgraph test suite."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large-graph tests excluded by run_tests.py")
