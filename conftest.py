"""
Global pytest configuration for flowctl.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests requiring a running control plane",
    )


def pytest_addoption(parser):
    """Add command line options for integration tests."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that require a running control plane",
    )
    parser.addoption(
        "--attempt-id",
        action="store",
        default=None,
        help="Attempt id queried by integration tests",
    )
