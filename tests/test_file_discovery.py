import os

import pytest

from localization_manager.core.errors import DiscoveryError
from localization_manager.utils.file_discovery import discover_files, resolve_root


@pytest.fixture
def tree(write_source, tmp_path):
    for path in [
        "src/root.ts",
        "a/src/one.ts",
        "a/src/nested/two.ts",
        "a/lib/three.ts",
        "b/src/four.tsx",
        "b/src/five.js",
    ]:
        write_source(path, "")
    return tmp_path


def _relative(files, root):
    return [os.path.relpath(f, root).replace(os.sep, "/") for f in files]


def test_default_pattern_matches_ts_below_src(tree):
    files = discover_files(str(tree))
    assert _relative(files, tree) == ["a/src/nested/two.ts", "a/src/one.ts", "src/root.ts"]
    assert all(os.path.isabs(f) for f in files)


def test_custom_pattern(tree):
    assert _relative(discover_files(str(tree), "b/**/*.tsx"), tree) == ["b/src/four.tsx"]


def test_empty_match_is_not_an_error(tree):
    assert discover_files(str(tree), "**/*.vue") == []


def test_relative_root_resolved_against_cwd(tree, monkeypatch):
    monkeypatch.chdir(tree)
    assert _relative(discover_files("a"), tree / "a") == ["src/nested/two.ts", "src/one.ts"]
    assert resolve_root("a") == str(tree / "a")


def test_directories_are_not_returned(tree):
    assert discover_files(str(tree), "**/src") == []


@pytest.mark.parametrize("pattern", ["", "   ", "/abs/**/*.ts"])
def test_malformed_pattern(tree, pattern):
    with pytest.raises(DiscoveryError):
        discover_files(str(tree), pattern)


def test_missing_root(tmp_path):
    with pytest.raises(DiscoveryError, match="Root directory not found"):
        discover_files(str(tmp_path / "missing"))


def test_brace_alternatives(write_source, tmp_path):
    for path in [
        "packages/core/src/browser/a.ts",
        "packages/core/src/browser/b.tsx",
        "packages/core/src/common/c.ts",
        "packages/core/src/node/d.ts",
        "dev-packages/cli/src/common/e.ts",
        "examples/api/src/browser/f.ts",
    ]:
        write_source(path, "")
    files = discover_files(str(tmp_path), "./{dev-packages,packages}/**/{browser,common}/**/*.{ts,tsx}")
    assert _relative(files, tmp_path) == [
        "dev-packages/cli/src/common/e.ts",
        "packages/core/src/browser/a.ts",
        "packages/core/src/browser/b.tsx",
        "packages/core/src/common/c.ts",
    ]


def test_overlapping_alternatives_are_listed_once(tree):
    assert _relative(discover_files(str(tree), "a/{src,src/nested}/**/*.ts"), tree) == [
        "a/src/nested/two.ts",
        "a/src/one.ts",
    ]


def test_dot_entries_are_skipped(write_source, tmp_path):
    write_source("pkg/src/visible.ts", "")
    write_source("pkg/src/.hidden.ts", "")
    write_source(".cache/src/cached.ts", "")
    write_source("pkg/.build/src/built.ts", "")
    assert _relative(discover_files(str(tmp_path)), tmp_path) == ["pkg/src/visible.ts"]
