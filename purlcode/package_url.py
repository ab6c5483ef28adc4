#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import json
import re
from collections import namedtuple
from collections.abc import Iterable
from collections.abc import Mapping
from types import MappingProxyType

from purlcode.codec import decode_component
from purlcode.components import get_component
from purlcode.constants import PURL_COMPONENTS
from purlcode.constants import SCHEME
from purlcode.constants import KnownQualifierNames
from purlcode.errors import PurlArgumentError
from purlcode.errors import PurlError
from purlcode.purl_types import get_purl_type_rule
from purlcode.result import result_from
from purlcode.strings import is_blank
from purlcode.strings import is_non_empty_string
from purlcode.strings import trim_leading_slashes

"""
Parse and build Package URLs (aka. purls).
See https://github.com/package-url/purl-spec

A purl string has this shape::

    pkg:<type>/<namespace>/<name>@<version>?<qualifiers>#<subpath>

For example::
>>> purl = PackageURL.from_string("pkg:npm/%40babel/core@7.20.0")
>>> purl.namespace, purl.name, purl.version
('@babel', 'core', '7.20.0')
>>> purl.to_string()
'pkg:npm/%40babel/core@7.20.0'
>>> str(PackageURL("pypi", name="Django_Package", qualifiers={"b": "2", "a": "1"}))
'pkg:pypi/django-package?a=1&b=2'
"""

looks_like_other_scheme = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*://").match
looks_like_type_and_path = re.compile(r"[A-Za-z0-9.\-]+/").match
split_authority = re.compile(r"[/?#]").split


def has_scheme_prefix(purl_str):
    return purl_str[: len(SCHEME) + 1].lower() == f"{SCHEME}:"


def parse_string(purl_str):
    """
    Return a tuple of six raw, decoded but not yet normalized components
    (type, namespace, name, version, qualifiers, subpath) parsed from a
    ``purl_str`` purl string. Qualifiers are returned as a list of (key, value)
    pairs keeping repeated keys. Absent components are None.

    Raise a PurlArgumentError if ``purl_str`` is not a string and a PurlError
    if it is not a valid purl.

    For example::
    >>> parse_string("pkg:maven/org.apache/commons-io@1.0?classifier=sources&a=1&a=2#src/main")
    ('maven', 'org.apache', 'commons-io', '1.0', [('classifier', 'sources'), ('a', '1'), ('a', '2')], 'src/main')
    >>> parse_string("   ")
    (None, None, None, None, None, None)
    >>> parse_string("npm/express@4.18.0")
    ('npm', None, 'express', '4.18.0', None, None)
    """
    if not isinstance(purl_str, str):
        raise PurlArgumentError("A purl string argument is required.")

    if is_blank(purl_str):
        return None, None, None, None, None, None

    purl_str = purl_str.strip()
    if (
        not has_scheme_prefix(purl_str)
        and not looks_like_other_scheme(purl_str)
        and looks_like_type_and_path(purl_str)
    ):
        purl_str = f"{SCHEME}:{purl_str}"

    scheme, colon, remainder = purl_str.partition(":")
    if not colon or scheme.lower() != SCHEME:
        raise PurlError(f'missing required "{SCHEME}" scheme component')

    # A purl has no authority: "pkg://" is accepted as "pkg:" but a user or a
    # password is never allowed.
    if remainder.startswith("//"):
        authority = split_authority(remainder[2:], maxsplit=1)[0]
        userinfo, at_sign, _host = authority.rpartition("@")
        if at_sign:
            username, _, password = userinfo.partition(":")
            if username or password:
                raise PurlError('cannot contain a "user:pass@host:port"')
    remainder = trim_leading_slashes(remainder)

    remainder, _, fragment = remainder.partition("#")
    pathname, _, query = remainder.partition("?")

    first_slash_index = pathname.find("/")
    if first_slash_index == -1:
        return decode_component("type", pathname), None, None, None, None, None

    raw_type = decode_component("type", pathname[:first_slash_index])

    if raw_type.lower() == "npm":
        # Skip an "@" scope and support pnpm ids with nested versions such as
        # "pkg:npm/next@14.2.10(react-dom@18.3.1(react@18.3.1))"
        at_sign_index = pathname.find("@", first_slash_index + 2)
    else:
        at_sign_index = pathname.rfind("@")

    # An "@" directly preceded by a "/" is not a version separator
    if at_sign_index <= first_slash_index or pathname[at_sign_index - 1] == "/":
        at_sign_index = -1

    raw_version = None
    if at_sign_index == -1:
        before_version = pathname[first_slash_index + 1 :]
    else:
        before_version = pathname[first_slash_index + 1 : at_sign_index]
        raw_version = decode_component("version", pathname[at_sign_index + 1 :])

    namespace, slash, name = before_version.rpartition("/")
    raw_name = decode_component("name", name)
    raw_namespace = decode_component("namespace", namespace) if slash else None

    raw_qualifiers = None
    if query:
        raw_qualifiers = []
        for pair in query.split("&"):
            key, _, value = pair.partition("=")
            raw_qualifiers.append(
                (
                    decode_component("qualifiers", key),
                    decode_component("qualifiers", value),
                )
            )

    raw_subpath = decode_component("subpath", fragment) if fragment else None

    return raw_type, raw_namespace, raw_name, raw_version, raw_qualifiers, raw_subpath


def normalize_and_validate(component, value):
    """
    Return a ``value`` of a ``component`` normalized with the generic component
    rules if it is a non-empty string, after validating it. Raise a PurlError
    on an invalid value.
    """
    handler = get_component(component)
    if is_non_empty_string(value):
        value = handler.normalize(value)
    handler.validate(value, throws=True)
    return value


def is_qualifiers_input(value):
    return isinstance(value, (str, Mapping)) or (
        isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray))
    )


def build_components(type, namespace, name, version, qualifiers, subpath):
    """
    Return a mapping of normalized and validated components built from raw,
    decoded components. Apply the generic rules of each component, then the
    rules of the purl type. Raise a PurlError on an invalid component.
    """
    purl_type = normalize_and_validate("type", type)
    namespace = normalize_and_validate("namespace", namespace)
    name = normalize_and_validate("name", name)
    version = normalize_and_validate("version", version)

    qualifiers_component = get_component("qualifiers")
    if is_qualifiers_input(qualifiers):
        qualifiers = qualifiers_component.normalize(qualifiers)
    qualifiers_component.validate(qualifiers, throws=True)

    subpath = normalize_and_validate("subpath", subpath)

    purl = {
        "type": purl_type,
        "namespace": namespace or None,
        "name": name,
        "version": version or None,
        "qualifiers": qualifiers or None,
        "subpath": subpath or None,
    }

    type_rule = get_purl_type_rule(purl_type)
    type_rule.normalize(purl)
    type_rule.validate(purl, throws=True)
    return purl


_components = namedtuple("PackageURL", PURL_COMPONENTS)


class PackageURL(_components):
    """
    An immutable Package URL built from its components. Construction fails with
    a PurlError if any component is invalid.

    Components are decoded strings: they are never percent-decoded by the
    constructor. ``qualifiers`` can be a mapping, an iterable of (key, value)
    pairs or a query string and is stored as a read-only mapping sorted by key.
    """

    __slots__ = ()

    SCHEME = SCHEME
    KnownQualifierNames = KnownQualifierNames

    def __new__(
        cls,
        type=None,
        namespace=None,
        name=None,
        version=None,
        qualifiers=None,
        subpath=None,
    ):
        purl = build_components(type, namespace, name, version, qualifiers, subpath)
        qualifiers = purl["qualifiers"]
        if qualifiers:
            purl["qualifiers"] = MappingProxyType(dict(sorted(qualifiers.items())))
        return super().__new__(cls, **purl)

    def __str__(self):
        return self.to_string()

    def __eq__(self, other):
        # a PackageURL never equals a plain tuple of the same components
        if not isinstance(other, PackageURL):
            return False
        return self.to_string() == other.to_string()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.to_string())

    def __getnewargs__(self):
        # a mappingproxy cannot be pickled
        qualifiers = dict(self.qualifiers) if self.qualifiers else None
        return self.type, self.namespace, self.name, self.version, qualifiers, self.subpath

    @classmethod
    def _make(cls, iterable):
        """
        Return a new, normalized and validated PackageURL from an ``iterable``
        of components in serialization order.
        """
        return cls(*iterable)

    def _replace(self, **kwargs):
        """
        Return a new PackageURL with the ``kwargs`` components replaced.
        The new PackageURL is normalized and validated.
        """
        components = self._asdict()
        components.update(kwargs)
        return PackageURL(**components)

    # used by copy.replace() on Python 3.13 and up
    __replace__ = _replace

    def to_string(self):
        """
        Return the canonical purl string of this PackageURL.
        """
        purl = [
            f"{SCHEME}:",
            get_component("type").encode(self.type),
            "/",
        ]
        if self.namespace:
            purl.append(get_component("namespace").encode(self.namespace))
            purl.append("/")

        purl.append(get_component("name").encode(self.name))

        if self.version:
            purl.append("@")
            purl.append(get_component("version").encode(self.version))

        if self.qualifiers:
            purl.append("?")
            purl.append(get_component("qualifiers").encode(self.qualifiers))

        if self.subpath:
            purl.append("#")
            purl.append(get_component("subpath").encode(self.subpath))

        return "".join(purl)

    def to_dict(self):
        """
        Return a new dict of the present components of this PackageURL,
        omitting absent components.

        For example::
        >>> PackageURL.from_string("pkg:gem/rails@7.1.0?platform=java").to_dict()
        {'type': 'gem', 'name': 'rails', 'version': '7.1.0', 'qualifiers': {'platform': 'java'}}
        """
        data = {}
        for component in PURL_COMPONENTS:
            value = getattr(self, component)
            if value is None:
                continue
            if component == "qualifiers":
                value = dict(value)
            data[component] = value
        return data

    def to_json(self):
        """
        Return a JSON string of the present components of this PackageURL.
        """
        return json.dumps(self.to_dict())

    @classmethod
    def from_string(cls, purl_str):
        """
        Return a new PackageURL parsed from a ``purl_str`` string.
        """
        return cls(*parse_string(purl_str))

    @classmethod
    def from_dict(cls, mapping):
        """
        Return a new PackageURL built from a ``mapping`` of components such as
        created with ``to_dict()``. Unknown keys are ignored.
        """
        if not isinstance(mapping, Mapping):
            raise PurlArgumentError("Object argument is required.")
        return cls(**{component: mapping.get(component) for component in PURL_COMPONENTS})

    @classmethod
    def from_json(cls, json_str):
        """
        Return a new PackageURL built from a ``json_str`` JSON object string
        such as created with ``to_json()``.
        """
        if not isinstance(json_str, str):
            raise PurlArgumentError("JSON string argument is required.")
        try:
            data = json.loads(json_str)
        except ValueError as e:
            raise PurlArgumentError("Failed to parse PackageURL from JSON.") from e
        return cls.from_dict(data)

    @classmethod
    def try_new(cls, *args, **kwargs):
        """
        Return an Ok Result with a new PackageURL or an Err Result with the error.
        """
        return result_from(cls, *args, **kwargs)

    @classmethod
    def try_from_string(cls, purl_str):
        return result_from(cls.from_string, purl_str)

    @classmethod
    def try_from_dict(cls, mapping):
        return result_from(cls.from_dict, mapping)

    @classmethod
    def try_from_json(cls, json_str):
        return result_from(cls.from_json, json_str)
