#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import re
from types import MappingProxyType

from purlcode.codec import encode_component
from purlcode.data import is_npm_builtin_name
from purlcode.data import is_npm_legacy_name
from purlcode.strings import is_nullish_or_empty_string
from purlcode.strings import is_semver_string
from purlcode.strings import lower_name
from purlcode.strings import lower_namespace
from purlcode.strings import lower_version
from purlcode.strings import replace_dashes_with_underscores
from purlcode.strings import replace_underscores_with_dashes
from purlcode.validate import fail
from purlcode.validate import validate_empty_by_type
from purlcode.validate import validate_required_by_type

"""
Ecosystem-specific normalization and validation rules, keyed by purl type.
See https://github.com/package-url/purl-spec/blob/master/PURL-TYPES.rst

The rules of a type apply to a mutable mapping of already normalized and
validated purl components, after the generic component rules. ``normalize``
may rewrite any component. ``validate`` checks cross-component constraints and
returns True or False, or raises a PurlError when ``throws`` is True.
"""


class PurlTypeRule:
    """
    Base rule for a purl type: normalize is a no-op and validate always
    succeeds. This is also the rule used for unknown purl types.
    """

    purl_type = None

    @classmethod
    def normalize(cls, purl):
        return purl

    @classmethod
    def validate(cls, purl, throws=False):
        return True


class LowercaseNamespaceAndNameRule(PurlTypeRule):
    @classmethod
    def normalize(cls, purl):
        lower_namespace(purl)
        lower_name(purl)
        return purl


class LowercaseVersionRule(PurlTypeRule):
    @classmethod
    def normalize(cls, purl):
        lower_version(purl)
        return purl


class LowercaseNamespaceRule(PurlTypeRule):
    @classmethod
    def normalize(cls, purl):
        lower_namespace(purl)
        return purl


class AlpmType(LowercaseNamespaceAndNameRule):
    purl_type = "alpm"


class ApkType(LowercaseNamespaceAndNameRule):
    purl_type = "apk"


class BitbucketType(LowercaseNamespaceAndNameRule):
    purl_type = "bitbucket"


class BitnamiType(PurlTypeRule):
    purl_type = "bitnami"

    @classmethod
    def normalize(cls, purl):
        lower_name(purl)
        return purl


class CocoapodsType(PurlTypeRule):
    purl_type = "cocoapods"

    has_whitespace = re.compile(r"\s").search

    @classmethod
    def validate(cls, purl, throws=False):
        name = purl["name"]
        if cls.has_whitespace(name):
            return fail('cocoapods "name" component cannot contain whitespace', throws)
        if "+" in name:
            return fail('cocoapods "name" component cannot contain a plus (+) character', throws)
        if name.startswith("."):
            return fail('cocoapods "name" component cannot start with a period', throws)
        return True


class ComposerType(LowercaseNamespaceAndNameRule):
    purl_type = "composer"


class ConanType(PurlTypeRule):
    purl_type = "conan"

    @classmethod
    def validate(cls, purl, throws=False):
        qualifiers = purl.get("qualifiers")
        if is_nullish_or_empty_string(purl.get("namespace")):
            if qualifiers and qualifiers.get("channel"):
                return fail(
                    'conan requires a "namespace" component when a "channel" qualifier is present',
                    throws,
                )
        elif not qualifiers:
            return fail(
                'conan requires a "qualifiers" component when a namespace is present',
                throws,
            )
        return True


class CpanType(PurlTypeRule):
    purl_type = "cpan"

    @classmethod
    def validate(cls, purl, throws=False):
        namespace = purl.get("namespace")
        if namespace and namespace != namespace.upper():
            return fail('cpan "namespace" component must be UPPERCASE', throws)
        return True


class CranType(PurlTypeRule):
    purl_type = "cran"

    @classmethod
    def validate(cls, purl, throws=False):
        return validate_required_by_type("cran", "version", purl.get("version"), throws)


class DebType(LowercaseNamespaceAndNameRule):
    purl_type = "deb"


class GithubType(LowercaseNamespaceAndNameRule):
    purl_type = "github"


class GitlabType(LowercaseNamespaceAndNameRule):
    purl_type = "gitlab"


class GolangType(PurlTypeRule):
    """
    Go module names are case-sensitive and are not lowercased.
    """

    purl_type = "golang"

    @classmethod
    def validate(cls, purl, throws=False):
        # A "v"-prefixed version must be a valid semver, which also covers
        # pseudo-versions: https://go.dev/doc/modules/version-numbers#pseudo-version-number
        version = purl.get("version")
        if version and version.startswith("v") and not is_semver_string(version[1:]):
            return fail(
                'golang "version" component starting with a "v" must be followed '
                "by a valid semver version",
                throws,
            )
        return True


class HexType(LowercaseNamespaceAndNameRule):
    purl_type = "hex"


class HuggingfaceType(LowercaseVersionRule):
    purl_type = "huggingface"


class LuarocksType(LowercaseVersionRule):
    purl_type = "luarocks"


class MavenType(PurlTypeRule):
    purl_type = "maven"

    @classmethod
    def validate(cls, purl, throws=False):
        return validate_required_by_type("maven", "namespace", purl.get("namespace"), throws)


class MlflowType(PurlTypeRule):
    purl_type = "mlflow"

    @classmethod
    def normalize(cls, purl):
        # Only Databricks model names are case insensitive
        repository_url = (purl.get("qualifiers") or {}).get("repository_url") or ""
        if "databricks" in repository_url:
            lower_name(purl)
        return purl

    @classmethod
    def validate(cls, purl, throws=False):
        return validate_empty_by_type("mlflow", "namespace", purl.get("namespace"), throws)


def get_npm_id(purl):
    """
    Return the npm package id of a ``purl`` mapping as "namespace/name" or "name".
    """
    namespace = purl.get("namespace")
    name = purl["name"]
    return f"{namespace}/{name}" if namespace else name


class NpmType(PurlTypeRule):
    """
    npm rules derived from https://github.com/npm/validate-npm-package-name
    (ISC License, Copyright (c) 2015, npm, Inc). Legacy names are exempted from
    the modern naming rules: they may be mixed case, use special characters or
    match a builtin module name.
    """

    purl_type = "npm"

    forbidden_names = ("node_modules", "favicon.ico")
    max_id_length = 214
    has_special_characters = re.compile(r"[~'!()*]").search

    @classmethod
    def normalize(cls, purl):
        lower_namespace(purl)
        if not is_npm_legacy_name(get_npm_id(purl)):
            lower_name(purl)
        return purl

    @classmethod
    def validate(cls, purl, throws=False):
        name = purl["name"]
        namespace = purl.get("namespace")
        npm_id = get_npm_id(purl)
        component = "namespace" if namespace else "name"

        if npm_id.startswith("."):
            return fail(f'npm "{component}" component cannot start with a period', throws)
        if npm_id.startswith("_"):
            return fail(f'npm "{component}" component cannot start with an underscore', throws)
        if name.strip() != name:
            return fail('npm "name" component cannot contain leading or trailing spaces', throws)
        if encode_component(name) != name:
            return fail('npm "name" component can only contain URL-friendly characters', throws)

        if namespace:
            if namespace.strip() != namespace:
                return fail(
                    'npm "namespace" component cannot contain leading or trailing spaces',
                    throws,
                )
            if not namespace.startswith("@"):
                return fail('npm "namespace" component must start with an "@" character', throws)
            scope = namespace[1:]
            if encode_component(scope) != scope:
                return fail(
                    'npm "namespace" component can only contain URL-friendly characters',
                    throws,
                )

        lowered_id = npm_id.lower()
        if lowered_id in cls.forbidden_names:
            return fail(f'npm "{component}" component of "{lowered_id}" is not allowed', throws)

        # The remaining checks only apply to modern names
        if is_npm_legacy_name(npm_id):
            return True

        if len(npm_id) > cls.max_id_length:
            return fail(
                'npm "namespace" and "name" components can not collectively be more '
                f"than {cls.max_id_length} characters",
                throws,
            )
        if lowered_id != npm_id:
            return fail('npm "name" component can not contain capital letters', throws)
        if cls.has_special_characters(name):
            return fail(
                "npm \"name\" component can not contain special characters (\"~'!()*\")",
                throws,
            )
        if is_npm_builtin_name(npm_id):
            return fail('npm "name" component can not be a core module name', throws)
        return True


class OciType(PurlTypeRule):
    purl_type = "oci"

    @classmethod
    def normalize(cls, purl):
        lower_name(purl)
        return purl

    @classmethod
    def validate(cls, purl, throws=False):
        return validate_empty_by_type("oci", "namespace", purl.get("namespace"), throws)


class PubType(PurlTypeRule):
    purl_type = "pub"

    is_pub_name = re.compile(r"[a-z0-9_]*").fullmatch

    @classmethod
    def normalize(cls, purl):
        lower_name(purl)
        purl["name"] = replace_dashes_with_underscores(purl["name"])
        return purl

    @classmethod
    def validate(cls, purl, throws=False):
        if not cls.is_pub_name(purl["name"]):
            return fail('pub "name" component may only contain [a-z0-9_] characters', throws)
        return True


class PypiType(PurlTypeRule):
    purl_type = "pypi"

    @classmethod
    def normalize(cls, purl):
        lower_namespace(purl)
        lower_name(purl)
        purl["name"] = replace_underscores_with_dashes(purl["name"])
        return purl


class QpkgType(LowercaseNamespaceRule):
    purl_type = "qpkg"


class RpmType(LowercaseNamespaceRule):
    purl_type = "rpm"


class SwidType(PurlTypeRule):
    purl_type = "swid"

    is_guid = re.compile(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        re.IGNORECASE,
    ).fullmatch

    @classmethod
    def validate(cls, purl, throws=False):
        tag_id = (purl.get("qualifiers") or {}).get("tag_id")
        if tag_id is None:
            return fail('swid requires a "tag_id" qualifier', throws)
        tag_id = tag_id.strip()
        if not tag_id:
            return fail('swid "tag_id" qualifier must not be empty', throws)
        if cls.is_guid(tag_id) and tag_id != tag_id.lower():
            return fail('swid "tag_id" qualifier must be lowercase when it is a GUID', throws)
        return True


class SwiftType(PurlTypeRule):
    purl_type = "swift"

    @classmethod
    def validate(cls, purl, throws=False):
        return validate_required_by_type(
            "swift", "namespace", purl.get("namespace"), throws
        ) and validate_required_by_type("swift", "version", purl.get("version"), throws)


PURL_TYPES_REGISTRY = MappingProxyType(
    {
        rule.purl_type: rule
        for rule in [
            AlpmType,
            ApkType,
            BitbucketType,
            BitnamiType,
            CocoapodsType,
            ComposerType,
            ConanType,
            CpanType,
            CranType,
            DebType,
            GithubType,
            GitlabType,
            GolangType,
            HexType,
            HuggingfaceType,
            LuarocksType,
            MavenType,
            MlflowType,
            NpmType,
            OciType,
            PubType,
            PypiType,
            QpkgType,
            RpmType,
            SwidType,
            SwiftType,
        ]
    }
)


def get_purl_type_rule(purl_type):
    """
    Return the PurlTypeRule class for a ``purl_type`` string. Unknown types
    get the no-op base PurlTypeRule.

    For example::
    >>> get_purl_type_rule("npm").__name__
    'NpmType'
    >>> get_purl_type_rule("unknown") is PurlTypeRule
    True
    """
    return PURL_TYPES_REGISTRY.get(purl_type, PurlTypeRule)
