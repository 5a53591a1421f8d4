"""Shared pytest configuration."""


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: deep-tree tests that build thousands of nodes")
