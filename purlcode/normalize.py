#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from collections.abc import Iterable
from collections.abc import Mapping
from urllib.parse import parse_qsl

from purlcode.errors import PurlError
from purlcode.strings import is_blank

"""
Generic, ecosystem-independent normalization of purl components.
Each normalizer returns None for a non-string input.
"""


def normalize_type(raw_type):
    # The type is case insensitive. The canonical form is lowercase.
    return raw_type.strip().lower() if isinstance(raw_type, str) else None


def normalize_namespace(raw_namespace):
    return normalize_purl_path(raw_namespace) if isinstance(raw_namespace, str) else None


def normalize_name(raw_name):
    return raw_name.strip() if isinstance(raw_name, str) else None


def normalize_version(raw_version):
    return raw_version.strip() if isinstance(raw_version, str) else None


def normalize_subpath(raw_subpath):
    if not isinstance(raw_subpath, str):
        return None
    return normalize_purl_path(raw_subpath, segment_filter=subpath_filter)


def normalize_purl_path(path, segment_filter=None):
    """
    Return a normalized purl ``path`` stripped from leading and trailing
    slashes, with repeated slashes collapsed, keeping only the segments
    accepted by the optional ``segment_filter`` callable.

    For example::
    >>> normalize_purl_path("//a//b/c/")
    'a/b/c'
    >>> normalize_purl_path("/a/./b/../c", segment_filter=subpath_filter)
    'a/b/c'
    """
    segments = [segment for segment in path.split("/") if segment]
    if segment_filter:
        segments = [segment for segment in segments if segment_filter(segment)]
    return "/".join(segments)


def subpath_filter(segment):
    """
    Return True if a subpath ``segment`` should be kept: it must not be "." or
    ".." and must not be blank.
    """
    return segment not in (".", "..") and not is_blank(segment)


def qualifiers_to_entries(raw_qualifiers):
    """
    Return an iterable of (key, value) pairs from ``raw_qualifiers`` that can
    be a query string, a mapping or an iterable of (key, value) pairs.

    For example::
    >>> list(qualifiers_to_entries("a=1&b=x+y&a=2"))
    [('a', '1'), ('b', 'x y'), ('a', '2')]
    >>> list(qualifiers_to_entries({"a": "1"}))
    [('a', '1')]
    """
    if isinstance(raw_qualifiers, str):
        return parse_qsl(raw_qualifiers, keep_blank_values=True)
    if isinstance(raw_qualifiers, Mapping):
        return raw_qualifiers.items()
    if isinstance(raw_qualifiers, Iterable):
        return raw_qualifiers
    return ()


def normalize_qualifiers(raw_qualifiers):
    """
    Return a new qualifiers dict from ``raw_qualifiers`` with lowercased keys
    and trimmed values, dropping empty values, or None if no qualifier remains.
    When a key is repeated, the last value wins.

    For example::
    >>> normalize_qualifiers("Arch=i386&distro= &arch=amd64")
    {'arch': 'amd64'}
    >>> normalize_qualifiers([("a", " "), ("b", None)]) is None
    True
    """
    qualifiers = {}
    for entry in qualifiers_to_entries(raw_qualifiers):
        try:
            key, value = entry
        except (TypeError, ValueError) as e:
            raise PurlError("qualifiers must be key/value pairs") from e

        if value is None:
            continue
        trimmed = (value if isinstance(value, str) else str(value)).strip()
        # A key=value pair with an empty value is the same as no key/value
        # at all for this key.
        if not trimmed:
            continue
        # A key is case insensitive. The canonical form is lowercase.
        qualifiers[key.lower() if isinstance(key, str) else key] = trimmed

    return qualifiers or None
