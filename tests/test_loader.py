"""Tests for the load/lookup entry points."""

import os

import pytest

from envscan.config import LoaderConfig
from envscan.errors import EmptyFileError, NoEnvFileFoundError, TooManyEntriesError
from envscan.loader import (
    LoadOptions,
    apply_to_environ,
    deinit,
    get,
    get_with_default,
    load,
    load_auto,
)
from envscan.values import BooleanValue, IntegerValue, StringValue


class TestLoadAuto:
    def test_loads_env_from_cwd(self, in_tmp_cwd, sample_env):
        """Test that load_auto finds and parses ./.env."""
        env_map = load_auto()
        assert env_map["DB_HOST"] == StringValue("localhost")
        assert env_map["DB_PORT"] == IntegerValue(5432)
        assert env_map["DEBUG"] == BooleanValue(True)

    def test_finds_two_levels_down(self, in_tmp_cwd, write_env):
        """Test that the default scan descends two levels."""
        write_env(b"NESTED=yes\n", "config/local/.env")
        assert load_auto() == {"NESTED": StringValue("yes")}

    def test_three_levels_is_too_deep(self, in_tmp_cwd, write_env):
        write_env(b"NESTED=yes\n", "a/b/c/.env")
        with pytest.raises(NoEnvFileFoundError):
            load_auto()

    def test_depth_from_config(self, in_tmp_cwd, write_env):
        write_env(b"NESTED=yes\n", "a/b/c/.env")
        assert load_auto(config=LoaderConfig(max_depth=3)) == {"NESTED": StringValue("yes")}

    def test_nothing_found(self, in_tmp_cwd):
        """Test that an empty tree raises NoEnvFileFoundError."""
        with pytest.raises(NoEnvFileFoundError) as exc_info:
            load_auto()
        assert exc_info.value.kind == "NoEnvFileFound"

    def test_parser_errors_propagate(self, in_tmp_cwd, write_env):
        """Test that parser failures surface unchanged."""
        write_env(b"")
        with pytest.raises(EmptyFileError):
            load_auto()

    def test_locator_errors_propagate(self, in_tmp_cwd):
        """Test that locator failures surface unchanged."""
        for name in ["a", "b", "c"]:
            (in_tmp_cwd / name).touch()
        with pytest.raises(TooManyEntriesError):
            load_auto(config=LoaderConfig(max_entries=2))


class TestLoadPath:
    def test_direct_path_skips_locator(self, in_tmp_cwd, write_env, monkeypatch):
        """Test that an explicit path is parsed without scanning."""
        write_env(b"PORT=9000\n", "settings/custom.env")

        def _no_scan(*args, **kwargs):
            raise AssertionError("locator should not run")

        monkeypatch.setattr("envscan.loader.find_env_file", _no_scan)
        env_map = load(LoadOptions(path="settings/custom.env"))
        assert env_map == {"PORT": IntegerValue(9000)}

    def test_relative_path_with_parent_segment_is_resolved(self, in_tmp_cwd, write_env):
        """Test that the path is canonicalised before it reaches the parser."""
        write_env(b"A=1\n", "one/.env")
        (in_tmp_cwd / "two").mkdir()
        assert load(LoadOptions(path="two/../one/.env")) == {"A": IntegerValue(1)}

    def test_missing_path(self, in_tmp_cwd):
        with pytest.raises(FileNotFoundError):
            load(LoadOptions(path="does-not-exist.env"))


class TestLookups:
    def test_get(self):
        env_map = {"A": IntegerValue(1)}
        assert get(env_map, "A") == IntegerValue(1)
        assert get(env_map, "B") is None

    def test_get_with_default(self):
        """Test that defaults apply only to missing keys and never mutate the map."""
        env_map = {"DB_PORT": IntegerValue(5432)}
        snapshot = dict(env_map)
        assert get_with_default(env_map, "DB_PORT", IntegerValue(8080)) == IntegerValue(5432)
        assert get_with_default(env_map, "DB_HOST", StringValue("localhost")) == StringValue("localhost")
        assert env_map == snapshot

    def test_get_with_default_keeps_falsy_values(self):
        env_map = {"DEBUG": BooleanValue(False), "EMPTY": StringValue("")}
        assert get_with_default(env_map, "DEBUG", BooleanValue(True)) == BooleanValue(False)
        assert get_with_default(env_map, "EMPTY", StringValue("x")) == StringValue("")

    def test_deinit_releases_entries(self):
        env_map = {"A": StringValue("x"), "B": IntegerValue(2)}
        deinit(env_map)
        assert env_map == {}


class TestApplyToEnviron:
    def test_does_not_override_by_default(self):
        """Test that existing variables win unless override is set."""
        environ = {"DB_HOST": "prod-db"}
        env_map = {"DB_HOST": StringValue("localhost"), "DB_PORT": IntegerValue(5432), "DEBUG": BooleanValue(True)}
        written = apply_to_environ(env_map, environ=environ)
        assert written == ["DB_PORT", "DEBUG"]
        assert environ == {"DB_HOST": "prod-db", "DB_PORT": "5432", "DEBUG": "true"}

    def test_override(self):
        environ = {"DB_HOST": "prod-db"}
        written = apply_to_environ({"DB_HOST": StringValue("localhost")}, override=True, environ=environ)
        assert written == ["DB_HOST"]
        assert environ["DB_HOST"] == "localhost"

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.delenv("ENVSCAN_TEST_FLAG", raising=False)
        apply_to_environ({"ENVSCAN_TEST_FLAG": BooleanValue(False)})
        assert os.environ["ENVSCAN_TEST_FLAG"] == "false"
        monkeypatch.delenv("ENVSCAN_TEST_FLAG")
