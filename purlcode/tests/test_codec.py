#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import pytest

from purlcode.codec import decode_component
from purlcode.codec import encode_component
from purlcode.codec import encode_name
from purlcode.codec import encode_namespace
from purlcode.codec import encode_qualifier_param
from purlcode.codec import encode_qualifiers
from purlcode.codec import encode_subpath
from purlcode.codec import encode_version
from purlcode.errors import PurlError


@pytest.mark.parametrize(
    "component, encoded, expected",
    [
        ("namespace", "%40babel", "@babel"),
        ("name", "na%2Fme", "na/me"),
        ("version", "1.0%2Bbuild", "1.0+build"),
        ("qualifiers", "value+with+plus", "value+with+plus"),
        ("name", "%E6%B5%8B%E8%AF%95", "测试"),
        ("subpath", "", ""),
    ],
)
def test_decode_component(component, encoded, expected):
    assert decode_component(component, encoded) == expected


@pytest.mark.parametrize(
    "component, encoded",
    [
        ("namespace", "100%"),
        ("name", "100%"),
        ("version", "%ZZ"),
        ("qualifiers", "%4"),
        ("subpath", "%C3%28"),
    ],
)
def test_decode_component_fails_on_malformed_escapes(component, encoded):
    with pytest.raises(PurlError, match=f'unable to decode "{component}" component'):
        decode_component(component, encoded)


def test_encode_component_uses_the_uri_component_character_set():
    assert encode_component("a-z_A.Z~0!9*'()") == "a-z_A.Z~0!9*'()"
    assert encode_component("a b#c?d&e=f+g") == "a%20b%23c%3Fd%26e%3Df%2Bg"
    assert encode_component("") == ""
    assert encode_component(None) == ""


def test_encode_name_and_version_keep_colons_only():
    assert encode_name("a:b/c") == "a:b%2Fc"
    assert encode_version("1:2.0/x") == "1:2.0%2Fx"


def test_encode_namespace_and_subpath_keep_colons_and_slashes():
    assert encode_namespace("a/b:c d") == "a/b:c%20d"
    assert encode_subpath("src/main:x@y") == "src/main:x%40y"
    assert encode_namespace(None) == ""
    assert encode_subpath("") == ""


@pytest.mark.parametrize(
    "param, expected",
    [
        ("a b", "a%20b"),
        ("a+b", "a%2Bb"),
        ("a~b", "a%7Eb"),
        ("a*b-c_d.e", "a*b-c_d.e"),
        ("x/y:z", "x%2Fy%3Az"),
        ("%20", "%2520"),
        ("", ""),
    ],
)
def test_encode_qualifier_param(param, expected):
    assert encode_qualifier_param(param) == expected


def test_encode_qualifiers_sorts_keys():
    qualifiers = {"z": "last", "a": "first", "m": "middle"}
    assert encode_qualifiers(qualifiers) == "a=first&m=middle&z=last"


def test_encode_qualifiers_never_confuses_spaces_and_plus_signs():
    assert encode_qualifiers({"note": "a b+c"}) == "note=a%20b%2Bc"


def test_encode_qualifiers_of_a_non_mapping_is_empty():
    assert encode_qualifiers(None) == ""
    assert encode_qualifiers("a=b") == ""
