#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import semantic_version

# str.strip() does not consider a byte order mark as whitespace
BOM = "\ufeff"


def is_blank(string):
    """
    Return True if ``string`` is empty or contains only whitespace.

    For example::
    >>> is_blank("")
    True
    >>> is_blank(" \\t\\n\\ufeff")
    True
    >>> is_blank(" a ")
    False
    """
    return not string.strip().strip(BOM).strip()


def is_non_empty_string(value):
    return isinstance(value, str) and len(value) > 0


def is_nullish_or_empty_string(value):
    return value is None or (isinstance(value, str) and not value)


def is_semver_string(value):
    """
    Return True if ``value`` is a valid semantic version 2.0.0 string.

    For example::
    >>> is_semver_string("1.2.3")
    True
    >>> is_semver_string("0.0.0-20191109021931-daa7c04131f5")
    True
    >>> is_semver_string("1.2")
    False
    >>> is_semver_string("01.2.3")
    False
    """
    return isinstance(value, str) and semantic_version.validate(value)


def trim_leading_slashes(string):
    return string.lstrip("/")


def lower_name(purl):
    purl["name"] = purl["name"].lower()


def lower_namespace(purl):
    namespace = purl.get("namespace")
    if isinstance(namespace, str):
        purl["namespace"] = namespace.lower()


def lower_version(purl):
    version = purl.get("version")
    if isinstance(version, str):
        purl["version"] = version.lower()


def replace_dashes_with_underscores(string):
    return string.replace("-", "_")


def replace_underscores_with_dashes(string):
    return string.replace("_", "-")
