#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import json
import os

import pytest

from purlcode.errors import PurlError
from purlcode.package_url import PackageURL

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
TEST_DATA = os.path.join(BASE_DIR, "test_data")


def load_test_cases(filename="test-suite-data.json"):
    with open(os.path.join(TEST_DATA, filename)) as f:
        return json.load(f)


TEST_CASES = load_test_cases()
VALID_CASES = [case for case in TEST_CASES if not case["is_invalid"]]
INVALID_CASES = [case for case in TEST_CASES if case["is_invalid"]]


def ids(case):
    return case["description"]


@pytest.mark.parametrize("case", VALID_CASES, ids=ids)
def test_parse_valid_purls(case):
    purl = PackageURL.from_string(case["purl"])
    assert purl.type == case["type"]
    assert purl.namespace == case["namespace"]
    assert purl.name == case["name"]
    assert purl.version == case["version"]
    assert purl.qualifiers == case["qualifiers"]
    assert purl.subpath == case["subpath"]
    assert purl.to_string() == case["canonical_purl"]


@pytest.mark.parametrize("case", VALID_CASES, ids=ids)
def test_build_valid_purls(case):
    purl = PackageURL(
        type=case["type"],
        namespace=case["namespace"],
        name=case["name"],
        version=case["version"],
        qualifiers=case["qualifiers"],
        subpath=case["subpath"],
    )
    assert purl.to_string() == case["canonical_purl"]


@pytest.mark.parametrize("case", VALID_CASES, ids=ids)
def test_canonical_purls_are_stable(case):
    canonical = case["canonical_purl"]
    assert PackageURL.from_string(canonical).to_string() == canonical


@pytest.mark.parametrize("case", INVALID_CASES, ids=ids)
def test_invalid_purls_are_rejected(case):
    with pytest.raises(PurlError):
        PackageURL.from_string(case["purl"])
    assert PackageURL.try_from_string(case["purl"]).is_err()
