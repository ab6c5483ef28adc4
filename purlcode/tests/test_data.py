#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import logging

import pytest

from purlcode import data
from purlcode.package_url import PackageURL


@pytest.fixture
def clear_name_caches():
    data.get_npm_builtin_names.cache_clear()
    data.get_npm_legacy_names.cache_clear()
    yield
    data.get_npm_builtin_names.cache_clear()
    data.get_npm_legacy_names.cache_clear()


def test_default_word_lists_are_loaded():
    builtin_names = data.load_builtin_names()
    assert "worker_threads" in builtin_names
    assert "fs/promises" in builtin_names
    assert data.FALLBACK_NPM_BUILTIN_NAMES <= builtin_names

    legacy_names = data.load_legacy_names()
    assert "JSONStream" in legacy_names
    assert data.FALLBACK_NPM_LEGACY_NAMES <= legacy_names


def test_get_data_dir(monkeypatch, tmp_path):
    monkeypatch.delenv("PURLCODE_DATA_DIR", raising=False)
    assert data.get_data_dir() == data.DEFAULT_DATA_DIR
    monkeypatch.setenv("PURLCODE_DATA_DIR", str(tmp_path))
    assert data.get_data_dir() == tmp_path


def test_load_names_from_a_location(tmp_path):
    location = tmp_path / "names.yml"
    location.write_text("- foo\n- Bar\n")
    assert data.load_names(location, fallback=frozenset()) == frozenset(["foo", "Bar"])


def test_load_names_falls_back_on_missing_files(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="purlcode.data"):
        names = data.load_builtin_names(tmp_path / "missing.yml")
    assert names is data.FALLBACK_NPM_BUILTIN_NAMES
    assert "Failed to load names" in caplog.text


def test_load_names_falls_back_on_invalid_yaml(tmp_path, caplog):
    location = tmp_path / "names.yml"
    location.write_text("- [unclosed\n")
    with caplog.at_level(logging.WARNING, logger="purlcode.data"):
        names = data.load_legacy_names(location)
    assert names is data.FALLBACK_NPM_LEGACY_NAMES
    assert "Failed to load names" in caplog.text


def test_load_names_falls_back_on_a_non_list(tmp_path, caplog):
    location = tmp_path / "names.yml"
    location.write_text("name: value\n")
    with caplog.at_level(logging.WARNING, logger="purlcode.data"):
        names = data.load_legacy_names(location)
    assert names is data.FALLBACK_NPM_LEGACY_NAMES
    assert "Invalid names list" in caplog.text


def test_data_dir_from_the_environment(monkeypatch, tmp_path, clear_name_caches):
    npm_dir = tmp_path / "npm"
    npm_dir.mkdir()
    (npm_dir / "builtin-names.yml").write_text("- leftpad\n")
    (npm_dir / "legacy-names.yml").write_text("- LeftPad\n")
    monkeypatch.setenv("PURLCODE_DATA_DIR", str(tmp_path))

    assert data.get_npm_builtin_names() == frozenset(["leftpad"])
    assert data.is_npm_builtin_name("LEFTPAD")
    assert data.is_npm_legacy_name("LeftPad")
    assert not data.is_npm_legacy_name("leftpad")

    assert PackageURL("npm", name="LeftPad").name == "LeftPad"
    assert PackageURL("npm", name="worker_threads").name == "worker_threads"


def test_word_lists_are_cached(clear_name_caches):
    assert data.get_npm_builtin_names() is data.get_npm_builtin_names()
    assert data.get_npm_legacy_names() is data.get_npm_legacy_names()
