#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import re
from collections.abc import Mapping

from purlcode.errors import PurlError
from purlcode.strings import is_non_empty_string
from purlcode.strings import is_nullish_or_empty_string

"""
Generic, ecosystem-independent validation of purl components.

Each validator returns True when the value is valid. On an invalid value,
it raises a PurlError if ``throws`` is True and returns False otherwise.
"""

is_type_charset = re.compile(r"[A-Za-z0-9.\-]*").fullmatch
is_qualifier_key_charset = re.compile(r"[A-Za-z0-9.\-_]*").fullmatch


def fail(message, throws):
    if throws:
        raise PurlError(message)
    return False


def validate_required(name, value, throws=False):
    if is_nullish_or_empty_string(value):
        return fail(f'"{name}" is a required component', throws)
    return True


def validate_required_by_type(purl_type, name, value, throws=False):
    if is_nullish_or_empty_string(value):
        return fail(f'{purl_type} requires a "{name}" component', throws)
    return True


def validate_empty_by_type(purl_type, name, value, throws=False):
    if not is_nullish_or_empty_string(value):
        return fail(f'{purl_type} "{name}" component must be empty', throws)
    return True


def validate_starts_without_number(name, value, throws=False):
    if is_non_empty_string(value) and value[0] in "0123456789":
        return fail(f'{name} "{value}" cannot start with a number', throws)
    return True


def validate_strings(name, value, throws=False):
    if value is None or isinstance(value, str):
        return True
    return fail(f'"{name}" must be a string', throws)


def validate_type(purl_type, throws=False):
    """
    Validate a ``purl_type``: required, not starting with a number and
    composed only of ASCII letters and numbers, "." and "-".

    For example::
    >>> validate_type("npm")
    True
    >>> validate_type("3d")
    False
    >>> validate_type("n$m", throws=True)
    Traceback (most recent call last):
    ...
    purlcode.errors.PurlError: invalid purl: type "n$m" contains an illegal character
    """
    if not (
        validate_required("type", purl_type, throws)
        and validate_strings("type", purl_type, throws)
        and validate_starts_without_number("type", purl_type, throws)
    ):
        return False
    if not is_type_charset(purl_type):
        return fail(f'type "{purl_type}" contains an illegal character', throws)
    return True


def validate_namespace(namespace, throws=False):
    return validate_strings("namespace", namespace, throws)


def validate_name(name, throws=False):
    return validate_required("name", name, throws) and validate_strings("name", name, throws)


def validate_version(version, throws=False):
    return validate_strings("version", version, throws)


def validate_subpath(subpath, throws=False):
    return validate_strings("subpath", subpath, throws)


def validate_qualifier_key(key, throws=False):
    """
    Validate a qualifier ``key``: not empty, not starting with a number and
    composed only of ASCII letters and numbers, ".", "-" and "_".
    """
    if not isinstance(key, str) or not key:
        return fail("qualifier key must be a non-empty string", throws)
    if not validate_starts_without_number("qualifier", key, throws):
        return False
    if not is_qualifier_key_charset(key):
        return fail(f'qualifier "{key}" contains an illegal character', throws)
    return True


def validate_qualifiers(qualifiers, throws=False):
    if qualifiers is None:
        return True
    if not isinstance(qualifiers, Mapping):
        return fail('"qualifiers" must be a mapping', throws)
    return all(validate_qualifier_key(key, throws) for key in qualifiers)
