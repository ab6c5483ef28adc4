#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import re
from collections.abc import Mapping
from urllib.parse import quote
from urllib.parse import quote_plus
from urllib.parse import unquote

from purlcode.errors import PurlError
from purlcode.strings import is_non_empty_string

"""
Component-scoped percent-encoding and decoding of purl components.

Encoding follows the JavaScript ``encodeURIComponent`` character set, then
selectively restores the characters that are legal in a given component:
``:`` in names and versions, ``:`` and ``/`` in namespaces and subpaths.

Qualifiers use the ``application/x-www-form-urlencoded`` character set, where
a space is always encoded as ``%20`` and a literal plus sign as ``%2B`` so
that these can never be confused.
"""

# a "%" that does not start a valid two hex digits escape
invalid_escape = re.compile(r"%(?![0-9A-Fa-f]{2})").search


def decode_component(component, encoded):
    """
    Return the percent-decoded ``encoded`` string of a ``component`` purl
    component. Raise a PurlError on a malformed escape sequence.

    For example::
    >>> decode_component("name", "%40babel")
    '@babel'
    >>> decode_component("version", "1.0+build")
    '1.0+build'
    """
    if invalid_escape(encoded):
        raise PurlError(f'unable to decode "{component}" component')
    try:
        return unquote(encoded, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise PurlError(f'unable to decode "{component}" component') from e


def encode_component(value):
    """
    Return ``value`` percent-encoded with the ``encodeURIComponent`` rules.

    For example::
    >>> encode_component("a b/c:d@e")
    'a%20b%2Fc%3Ad%40e'
    >>> encode_component("-_.!~*'()")
    "-_.!~*'()"
    """
    return quote(value, safe="!~*'()") if is_non_empty_string(value) else ""


def form_encode(value):
    """
    Return ``value`` encoded with the ``application/x-www-form-urlencoded``
    character set where only ASCII alphanumerics and ``*-._`` are left as-is
    and spaces become plus signs.
    """
    # quote_plus always keeps "~" which is not part of the form-urlencoded set
    return quote_plus(value, safe="*").replace("~", "%7E")


def encode_name(name):
    return encode_component(name).replace("%3A", ":") if is_non_empty_string(name) else ""


def encode_version(version):
    return encode_component(version).replace("%3A", ":") if is_non_empty_string(version) else ""


def encode_namespace(namespace):
    if not is_non_empty_string(namespace):
        return ""
    return encode_component(namespace).replace("%3A", ":").replace("%2F", "/")


def encode_subpath(subpath):
    if not is_non_empty_string(subpath):
        return ""
    return encode_component(subpath).replace("%3A", ":").replace("%2F", "/")


def encode_qualifier_param(param):
    """
    Return a single qualifier key or value ``param`` encoded.

    For example::
    >>> encode_qualifier_param("a b")
    'a%20b'
    >>> encode_qualifier_param("a+b")
    'a%2Bb'
    >>> encode_qualifier_param("")
    ''
    """
    if not is_non_empty_string(param):
        return ""
    # A literal plus sign is already encoded as %2B: any remaining "+" is a space
    return form_encode(param).replace("+", "%20")


def encode_qualifiers(qualifiers):
    """
    Return a canonical qualifiers string from a ``qualifiers`` mapping with
    keys sorted lexicographically.

    For example::
    >>> encode_qualifiers({"b": "2", "a": "1 +x"})
    'a=1%20%2Bx&b=2'
    >>> encode_qualifiers(None)
    ''
    """
    if not isinstance(qualifiers, Mapping):
        return ""
    return "&".join(
        f"{encode_qualifier_param(key)}={encode_qualifier_param(str(qualifiers[key]))}"
        for key in sorted(qualifiers)
    )
