#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from purlcode.package_url import PackageURL


class PackageURLBuilder:
    """
    Build a PackageURL step by step with chained setters. The components are
    normalized and validated only when calling ``build()``.

    For example::
    >>> purl = PackageURLBuilder.npm().namespace("@babel").name("core").version("7.20.0").build()
    >>> purl.to_string()
    'pkg:npm/%40babel/core@7.20.0'
    """

    def __init__(self):
        self._type = None
        self._namespace = None
        self._name = None
        self._version = None
        self._qualifiers = None
        self._subpath = None

    def type(self, purl_type):
        self._type = purl_type
        return self

    def namespace(self, namespace):
        self._namespace = namespace
        return self

    def name(self, name):
        self._name = name
        return self

    def version(self, version):
        self._version = version
        return self

    def qualifiers(self, qualifiers):
        """
        Replace all the qualifiers with a copy of the ``qualifiers`` mapping.
        """
        self._qualifiers = dict(qualifiers) if qualifiers is not None else None
        return self

    def qualifier(self, key, value):
        """
        Add a qualifier ``key`` with a ``value``, replacing any existing value.
        """
        if self._qualifiers is None:
            self._qualifiers = {}
        self._qualifiers[key] = value
        return self

    def subpath(self, subpath):
        self._subpath = subpath
        return self

    def build(self):
        """
        Return a new PackageURL from this builder components.
        Raise a PurlError if the components are not valid.
        """
        return PackageURL(
            type=self._type,
            namespace=self._namespace,
            name=self._name,
            version=self._version,
            qualifiers=self._qualifiers,
            subpath=self._subpath,
        )

    @classmethod
    def create(cls):
        return cls()

    @classmethod
    def from_purl(cls, purl):
        """
        Return a new builder initialized with the components of a ``purl``
        PackageURL.
        """
        builder = cls()
        builder._type = purl.type
        builder._namespace = purl.namespace
        builder._name = purl.name
        builder._version = purl.version
        builder._qualifiers = dict(purl.qualifiers) if purl.qualifiers else None
        builder._subpath = purl.subpath
        return builder

    @classmethod
    def npm(cls):
        return cls().type("npm")

    @classmethod
    def pypi(cls):
        return cls().type("pypi")

    @classmethod
    def maven(cls):
        return cls().type("maven")

    @classmethod
    def gem(cls):
        return cls().type("gem")

    @classmethod
    def golang(cls):
        return cls().type("golang")

    @classmethod
    def cargo(cls):
        return cls().type("cargo")

    @classmethod
    def nuget(cls):
        return cls().type("nuget")

    @classmethod
    def composer(cls):
        return cls().type("composer")
