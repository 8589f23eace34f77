"""Tests for toolchain_home.env module."""

import os
from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from toolchain_home.env import Env, OsEnv, StaticEnv, OS_ENV


class TestStaticEnv:
    """Test the injected environment snapshot."""

    def test_defaults(self):
        env = StaticEnv()
        assert env.platform == "posix"
        assert env.var("HOME") is None
        assert env.current_dir() == PurePosixPath("/")
        assert env.account_home() is None

    def test_values(self):
        env = StaticEnv(
            variables={"HOME": "/home/alice"},
            cwd="C:\\work",
            platform="nt",
            user_home="C:\\Users\\Alice",
        )
        assert env.var("HOME") == "/home/alice"
        assert env.var("CARGO_HOME") is None
        assert env.current_dir() == PureWindowsPath("C:\\work")
        assert env.platform == "nt"
        assert env.account_home() == "C:\\Users\\Alice"

    def test_string_cwd(self):
        assert StaticEnv(cwd="/work").current_dir() == PurePosixPath("/work")

    def test_empty_value_kept(self):
        # Empty-vs-unset is decided by the resolvers, not the env
        assert StaticEnv(variables={"CARGO_HOME": ""}).var("CARGO_HOME") == ""

    def test_windows_paths_use_windows_rules(self):
        env = StaticEnv(platform="nt")
        path = env.path("D:\\cargo")
        assert isinstance(path, PureWindowsPath)
        assert path.is_absolute()
        assert str(path / ".cargo") == "D:\\cargo\\.cargo"

    def test_posix_paths_use_posix_rules(self):
        env = StaticEnv(platform="posix")
        path = env.path("/home/alice")
        assert isinstance(path, PurePosixPath)
        assert not env.path("D:\\cargo").is_absolute()

    def test_path_accepts_path_objects(self):
        env = StaticEnv(platform="nt")
        assert env.path(PureWindowsPath("C:\\work")) == PureWindowsPath("C:\\work")


class TestEnvBase:
    """Test the abstract Env base."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            Env()

    def test_incomplete_subclass_rejected(self):
        class VarsOnly(Env):
            def var(self, name):
                return None

        with pytest.raises(TypeError):
            VarsOnly()

    def test_default_path_is_concrete(self):
        assert isinstance(OS_ENV.path("/tmp"), Path)


class TestOsEnv:
    """Test the live process environment."""

    def test_shared_instance(self):
        assert isinstance(OS_ENV, OsEnv)
        assert isinstance(OS_ENV, Env)

    def test_platform_matches_os(self):
        assert OS_ENV.platform == ("nt" if os.name == "nt" else "posix")

    def test_var_reads_environ(self, monkeypatch):
        monkeypatch.setenv("TOOLCHAIN_HOME_TEST_VAR", "value")
        assert OS_ENV.var("TOOLCHAIN_HOME_TEST_VAR") == "value"
        monkeypatch.delenv("TOOLCHAIN_HOME_TEST_VAR")
        assert OS_ENV.var("TOOLCHAIN_HOME_TEST_VAR") is None

    def test_current_dir(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert OS_ENV.current_dir() == Path(os.getcwd())

    @pytest.mark.skipif(os.name == "nt", reason="passwd lookup")
    def test_account_home_from_passwd(self, monkeypatch):
        import pwd

        class Record:
            pw_dir = "/home/recorded"

        monkeypatch.setattr(pwd, "getpwuid", lambda uid: Record())
        assert OS_ENV.account_home() == "/home/recorded"

    @pytest.mark.skipif(os.name == "nt", reason="passwd lookup")
    def test_account_home_empty_field(self, monkeypatch):
        import pwd

        class Record:
            pw_dir = ""

        monkeypatch.setattr(pwd, "getpwuid", lambda uid: Record())
        assert OS_ENV.account_home() is None

    @pytest.mark.skipif(os.name != "nt", reason="known folder lookup")
    def test_account_home_known_folder(self):
        assert OS_ENV.account_home()
