#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable

from purlcode import codec
from purlcode import normalize
from purlcode import validate

# Rules for each purl component:
# https://github.com/package-url/purl-spec/blob/master/PURL-SPECIFICATION.rst#rules-for-each-purl-component

COMPONENT_SORT_ORDER = MappingProxyType(
    {
        "type": 0,
        "namespace": 1,
        "name": 2,
        "version": 3,
        "qualifiers": 4,
        "qualifier_key": 5,
        "qualifier_value": 6,
        "subpath": 7,
    }
)


def component_sort_key(component):
    """
    Return a sort key for a ``component`` name: known components sort in their
    serialization order, before any other name sorted alphabetically.

    For example::
    >>> sorted(["subpath", "zzz", "type", "name"], key=component_sort_key)
    ['type', 'name', 'subpath', 'zzz']
    """
    order = COMPONENT_SORT_ORDER.get(component)
    if order is None:
        return 1, 0, component
    return 0, order, ""


def default_normalizer(value):
    return value if isinstance(value, str) else None


def default_validator(value, throws=False):
    return True


@dataclass(frozen=True)
class PurlComponent:
    """
    The encode, normalize and validate functions of a purl component.
    """

    name: str
    encode: Callable = codec.encode_component
    normalize: Callable = default_normalizer
    validate: Callable = default_validator


PURL_COMPONENTS_BY_NAME = MappingProxyType(
    {
        component.name: component
        for component in sorted(
            [
                PurlComponent(
                    name="type",
                    normalize=normalize.normalize_type,
                    validate=validate.validate_type,
                ),
                PurlComponent(
                    name="namespace",
                    encode=codec.encode_namespace,
                    normalize=normalize.normalize_namespace,
                    validate=validate.validate_namespace,
                ),
                PurlComponent(
                    name="name",
                    encode=codec.encode_name,
                    normalize=normalize.normalize_name,
                    validate=validate.validate_name,
                ),
                PurlComponent(
                    name="version",
                    encode=codec.encode_version,
                    normalize=normalize.normalize_version,
                    validate=validate.validate_version,
                ),
                PurlComponent(
                    name="qualifiers",
                    encode=codec.encode_qualifiers,
                    normalize=normalize.normalize_qualifiers,
                    validate=validate.validate_qualifiers,
                ),
                PurlComponent(
                    name="qualifier_key",
                    encode=codec.encode_qualifier_param,
                    validate=validate.validate_qualifier_key,
                ),
                PurlComponent(
                    name="qualifier_value",
                    encode=codec.encode_qualifier_param,
                ),
                PurlComponent(
                    name="subpath",
                    encode=codec.encode_subpath,
                    normalize=normalize.normalize_subpath,
                    validate=validate.validate_subpath,
                ),
            ],
            key=lambda c: component_sort_key(c.name),
        )
    }
)


def get_component(name):
    """
    Return the PurlComponent for a component ``name``.
    Raise a KeyError for an unknown component.
    """
    return PURL_COMPONENTS_BY_NAME[name]
