"""Unit tests configuration file."""

import pytest

from entitygen.runtime import Err, FetchError, PropertyKey


def pytest_configure(config):
    """Disable verbose output when running tests."""
    terminal = config.pluginmanager.getplugin("terminal")
    if terminal:
        terminal.TerminalReporter.showfspath = False


class FakeFetcher:
    """Stands in for the fetch layer of the host application.

    Property fetches are answered from ``values`` by variant name, other
    calls (query_*) by method name. Anything unknown fails with UNDEFINED.
    Every call is recorded as (method, args).
    """

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.calls = []

    def __getattr__(self, method):
        if method.startswith("_"):
            raise AttributeError(method)

        def fetch(*args):
            self.calls.append((method, args))
            if args and isinstance(args[-1], PropertyKey):
                key = args[-1].variant
            else:
                key = method
            return self.values.get(key, Err(FetchError.UNDEFINED))

        return fetch

    def called(self, method):
        return [args for name, args in self.calls if name == method]


@pytest.fixture
def fetcher():
    return FakeFetcher()
