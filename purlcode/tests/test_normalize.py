#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import pytest

from purlcode.errors import PurlError
from purlcode.normalize import normalize_name
from purlcode.normalize import normalize_namespace
from purlcode.normalize import normalize_purl_path
from purlcode.normalize import normalize_qualifiers
from purlcode.normalize import normalize_subpath
from purlcode.normalize import normalize_type
from purlcode.normalize import normalize_version
from purlcode.normalize import qualifiers_to_entries
from purlcode.normalize import subpath_filter


def test_normalize_type_lowercases_and_trims():
    assert normalize_type(" MaVen ") == "maven"
    assert normalize_type(None) is None


def test_normalize_namespace_collapses_slashes():
    assert normalize_namespace("//a//b/") == "a/b"
    assert normalize_namespace("/") == ""
    assert normalize_namespace(1) is None


def test_normalize_namespace_keeps_dot_segments():
    assert normalize_namespace("a/./b/..") == "a/./b/.."


def test_normalize_name_and_version_trim():
    assert normalize_name("  name ") == "name"
    assert normalize_version(" 1.0\n") == "1.0"
    assert normalize_name(object()) is None
    assert normalize_version(None) is None


@pytest.mark.parametrize(
    "subpath, expected",
    [
        ("/path/to/file", "path/to/file"),
        ("path//to///file", "path/to/file"),
        ("./a/../b/.", "a/b"),
        ("a/ /b", "a/b"),
        ("..", ""),
    ],
)
def test_normalize_subpath(subpath, expected):
    assert normalize_subpath(subpath) == expected


def test_normalize_subpath_of_a_non_string_is_none():
    assert normalize_subpath(["a"]) is None


def test_normalize_purl_path_with_a_filter():
    assert normalize_purl_path("a/skip/b", segment_filter=lambda s: s != "skip") == "a/b"


def test_subpath_filter():
    assert subpath_filter("a")
    assert not subpath_filter(".")
    assert not subpath_filter("..")
    assert not subpath_filter("  ")


def test_qualifiers_to_entries_of_unsupported_input_is_empty():
    assert list(qualifiers_to_entries(42)) == []


def test_qualifiers_to_entries_of_iterable_pairs():
    pairs = [("a", "1"), ("b", "2")]
    assert list(qualifiers_to_entries(iter(pairs))) == pairs


def test_normalize_qualifiers_lowercases_keys_and_trims_values():
    assert normalize_qualifiers({"Arch": " i386 ", "DISTRO": "jessie"}) == {
        "arch": "i386",
        "distro": "jessie",
    }


def test_normalize_qualifiers_drops_empty_and_none_values():
    assert normalize_qualifiers({"a": "", "b": None, "c": " ", "d": "x"}) == {"d": "x"}
    assert normalize_qualifiers({"a": ""}) is None
    assert normalize_qualifiers([]) is None


def test_normalize_qualifiers_last_duplicate_key_wins():
    assert normalize_qualifiers([("key", "first"), ("KEY", "second")]) == {"key": "second"}


def test_normalize_qualifiers_decodes_query_strings():
    assert normalize_qualifiers("a=%2521&b=x+y") == {"a": "%21", "b": "x y"}


def test_normalize_qualifiers_converts_values_to_strings():
    assert normalize_qualifiers({"epoch": 1}) == {"epoch": "1"}


def test_normalize_qualifiers_rejects_entries_that_are_not_pairs():
    with pytest.raises(PurlError, match="qualifiers must be key/value pairs"):
        normalize_qualifiers([("a", "1", "2")])
    with pytest.raises(PurlError, match="qualifiers must be key/value pairs"):
        normalize_qualifiers([1])


def test_normalize_qualifiers_keeps_non_string_keys_for_validation():
    assert normalize_qualifiers({1: "x"}) == {1: "x"}


@pytest.mark.parametrize(
    "normalizer, value",
    [
        (normalize_type, " MaVen "),
        (normalize_namespace, "//Org//Apache/"),
        (normalize_namespace, "a/./b/.."),
        (normalize_subpath, "/./a//../b/ /c/"),
        (normalize_qualifiers, {"Arch": " i386 ", "empty": "", "DISTRO": "jessie"}),
        (normalize_qualifiers, "a=%2521&b=x+y&B=z"),
        (normalize_qualifiers, [("key", "first"), ("KEY", "second")]),
    ],
)
def test_normalizers_are_idempotent(normalizer, value):
    normalized = normalizer(value)
    assert normalizer(normalized) == normalized
