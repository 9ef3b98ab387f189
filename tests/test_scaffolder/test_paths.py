"""Tests for scaffold path resolution (el_scaffold.scaffolder.paths)."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from el_scaffold.config import ScaffoldConfig
from el_scaffold.scaffolder.paths import (
    ResolvedPaths,
    element_subdir,
    relative_path,
    resolve_paths,
)

pytestmark = pytest.mark.unit


def _roundtrip(resolved: ResolvedPaths) -> Path:
    """Follow ``relative_dep_cache_path`` from the element dir back to an absolute path."""
    return Path(os.path.normpath(resolved.target_element_dir / resolved.relative_dep_cache_path))


class TestDefaults:
    @pytest.mark.parametrize("name", ["x-foo", "my-element", "a-b-c"])
    def test_target_dir_under_app_elements(self, tmp_path: Path, name: str):
        resolved = resolve_paths(ScaffoldConfig(element_name=name), tmp_path)
        assert resolved.target_element_dir == tmp_path / "app" / "elements" / name

    def test_root_strings_end_with_separator(self, tmp_path: Path):
        resolved = resolve_paths(ScaffoldConfig(element_name="x-foo"), tmp_path)
        assert resolved.app_root == "app/"
        assert resolved.elements_root == "app/elements/"
        assert resolved.dep_cache_root == "app/bower_components/"

    def test_relative_dep_cache_path(self, tmp_path: Path):
        resolved = resolve_paths(ScaffoldConfig(element_name="x-foo"), tmp_path)
        assert resolved.relative_dep_cache_path == "../../bower_components"

    def test_derived_file_locations(self, tmp_path: Path):
        resolved = resolve_paths(ScaffoldConfig(element_name="x-foo"), tmp_path)
        assert resolved.aggregator_path == tmp_path / "app" / "elements" / "elements.html"
        assert resolved.harness_path == tmp_path / "app" / "test" / "index.html"
        assert resolved.test_dir == tmp_path / "app" / "test"
        assert resolved.dep_cache_dir == tmp_path / "app" / "bower_components"

    def test_relative_cwd_is_made_absolute(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        resolved = resolve_paths(ScaffoldConfig(element_name="x-foo"), ".")
        assert resolved.cwd == Path(os.path.abspath("."))
        assert resolved.target_element_dir.is_absolute()


class TestOverrides:
    def test_app_override_gets_trailing_separator(self, tmp_path: Path):
        config = ScaffoldConfig(element_name="x-foo", app_root="subfolder/app")
        resolved = resolve_paths(config, tmp_path)
        assert resolved.app_root == "subfolder/app/"
        assert resolved.elements_root == "subfolder/app/elements/"
        assert resolved.target_element_dir == tmp_path / "subfolder" / "app" / "elements" / "x-foo"

    def test_app_override_already_terminated(self, tmp_path: Path):
        config = ScaffoldConfig(element_name="x-foo", app_root="web/")
        assert resolve_paths(config, tmp_path).app_root == "web/"

    def test_elements_and_dep_cache_overrides(self, tmp_path: Path):
        config = ScaffoldConfig(
            element_name="x-foo",
            elements_root="custom-elements",
            dep_cache_root="vendor",
        )
        resolved = resolve_paths(config, tmp_path)
        assert resolved.elements_root == "app/custom-elements/"
        assert resolved.dep_cache_root == "app/vendor/"
        assert resolved.relative_dep_cache_path == "../../vendor"

    def test_nested_path_replaces_element_dir(self, tmp_path: Path):
        config = ScaffoldConfig(element_name="x-foo", nested_path="foo/bar/baz")
        resolved = resolve_paths(config, tmp_path)
        assert resolved.target_element_dir == tmp_path / "app" / "elements" / "foo" / "bar" / "baz"
        assert resolved.relative_dep_cache_path == "../../../../bower_components"

    @pytest.mark.parametrize("nested", ["/foo/bar", "//foo/bar/", "\\foo\\bar"])
    def test_leading_separator_stays_under_elements_root(self, tmp_path: Path, nested: str):
        config = ScaffoldConfig(element_name="x-foo", nested_path=nested)
        resolved = resolve_paths(config, tmp_path)
        assert resolved.target_element_dir == tmp_path / "app" / "elements" / "foo" / "bar"
        assert resolved.relative_dep_cache_path == "../../../bower_components"

    @pytest.mark.parametrize(
        "nested",
        [None, "a", "a/b", "a/b/c/d", "./a//b/"],
    )
    def test_relative_path_round_trips(self, tmp_path: Path, nested: str | None):
        config = ScaffoldConfig(element_name="x-foo", nested_path=nested)
        resolved = resolve_paths(config, tmp_path)
        assert _roundtrip(resolved) == resolved.dep_cache_dir

    def test_round_trip_independent_of_process_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        config = ScaffoldConfig(element_name="x-foo", nested_path="deep/er")
        first = resolve_paths(config, tmp_path)
        elsewhere = tmp_path / "elsewhere"
        elsewhere.mkdir()
        monkeypatch.chdir(elsewhere)
        second = resolve_paths(config, tmp_path)
        assert first.relative_dep_cache_path == second.relative_dep_cache_path


class TestElementSubdir:
    def test_defaults_to_element_name(self):
        assert element_subdir(ScaffoldConfig(element_name="x-foo")) == "x-foo"

    def test_normalizes_nested_path(self):
        config = ScaffoldConfig(element_name="x-foo", nested_path="/./foo//bar/")
        assert element_subdir(config) == "foo/bar"


class TestRelativePath:
    def test_uses_forward_slashes(self, tmp_path: Path):
        assert relative_path(tmp_path / "a" / "b", tmp_path / "c") == "../a/b"
