"""Pytest configuration and fixtures for toolchain_home tests."""

import pytest

from toolchain_home import StaticEnv


@pytest.fixture
def unix_env():
    """
    Build a posix StaticEnv snapshot.

    Returns a factory taking environment variables as keyword arguments plus
    optional ``cwd`` and ``user_home``.
    """
    def make(cwd="/work", user_home=None, **variables):
        return StaticEnv(
            variables=variables,
            cwd=cwd,
            platform="posix",
            user_home=user_home,
        )
    return make


@pytest.fixture
def windows_env():
    """Same as unix_env, but on the Windows code path."""
    def make(cwd="C:\\work", user_home=None, **variables):
        return StaticEnv(
            variables=variables,
            cwd=cwd,
            platform="nt",
            user_home=user_home,
        )
    return make
