#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from typing import NamedTuple

"""
Infer repository and download URLs from a PackageURL for common ecosystems.

For example::
>>> from purlcode.package_url import PackageURL
>>> purl = PackageURL.from_string("pkg:npm/%40babel/core@7.20.0")
>>> to_repository_url(purl)
RepositoryUrl(url='https://npmjs.com/package/@babel/core', type='web')
>>> to_download_url(purl)
DownloadUrl(url='https://registry.npmjs.org/@babel/core/-/core-7.20.0.tgz', type='tarball')
"""


class RepositoryUrl(NamedTuple):
    """
    A URL where the source code of a package can be found. ``type`` is one of
    "git", "hg", "svn" or "web".
    """

    url: str
    type: str


class DownloadUrl(NamedTuple):
    """
    A URL where a package artifact can be downloaded. ``type`` is one of
    "tarball", "zip", "exe", "wheel", "jar", "gem" or "other".
    """

    url: str
    type: str


def with_namespace(purl):
    return f"{purl.namespace}/{purl.name}" if purl.namespace else purl.name


def maven_group_path(purl):
    return purl.namespace.replace(".", "/")


def npm_repository_url(purl):
    return RepositoryUrl(f"https://npmjs.com/package/{with_namespace(purl)}", "web")


def pypi_repository_url(purl):
    return RepositoryUrl(f"https://pypi.org/project/{purl.name}/", "web")


def maven_repository_url(purl):
    if not purl.namespace:
        return
    return RepositoryUrl(
        f"https://repo1.maven.org/maven2/{maven_group_path(purl)}/{purl.name}/", "web"
    )


def gem_repository_url(purl):
    return RepositoryUrl(f"https://rubygems.org/gems/{purl.name}", "web")


def golang_repository_url(purl):
    if not purl.namespace:
        return
    return RepositoryUrl(f"https://{purl.namespace}/{purl.name}", "git")


def cargo_repository_url(purl):
    return RepositoryUrl(f"https://crates.io/crates/{purl.name}", "web")


def nuget_repository_url(purl):
    return RepositoryUrl(f"https://nuget.org/packages/{purl.name}/", "web")


def composer_repository_url(purl):
    return RepositoryUrl(f"https://packagist.org/packages/{with_namespace(purl)}", "web")


def get_git_host_repository_url(host):
    def git_host_repository_url(purl):
        if not purl.namespace:
            return
        return RepositoryUrl(f"https://{host}/{purl.namespace}/{purl.name}", "git")

    return git_host_repository_url


def hex_repository_url(purl):
    return RepositoryUrl(f"https://hex.pm/packages/{purl.name}", "web")


def pub_repository_url(purl):
    return RepositoryUrl(f"https://pub.dev/packages/{purl.name}", "web")


def luarocks_repository_url(purl):
    return RepositoryUrl(f"https://luarocks.org/modules/{with_namespace(purl)}", "web")


REPOSITORY_URL_BUILDERS = {
    "npm": npm_repository_url,
    "pypi": pypi_repository_url,
    "maven": maven_repository_url,
    "gem": gem_repository_url,
    "golang": golang_repository_url,
    "cargo": cargo_repository_url,
    "nuget": nuget_repository_url,
    "composer": composer_repository_url,
    "github": get_git_host_repository_url("github.com"),
    "gitlab": get_git_host_repository_url("gitlab.com"),
    "bitbucket": get_git_host_repository_url("bitbucket.org"),
    "hex": hex_repository_url,
    "pub": pub_repository_url,
    "luarocks": luarocks_repository_url,
}


def npm_download_url(purl):
    return DownloadUrl(
        f"https://registry.npmjs.org/{with_namespace(purl)}/-/{purl.name}-{purl.version}.tgz",
        "tarball",
    )


def pypi_download_url(purl):
    return DownloadUrl(f"https://pypi.org/simple/{purl.name}/", "wheel")


def maven_download_url(purl):
    if not purl.namespace:
        return
    name = purl.name
    version = purl.version
    return DownloadUrl(
        f"https://repo1.maven.org/maven2/{maven_group_path(purl)}/{name}/{version}/{name}-{version}.jar",
        "jar",
    )


def gem_download_url(purl):
    return DownloadUrl(f"https://rubygems.org/downloads/{purl.name}-{purl.version}.gem", "gem")


def cargo_download_url(purl):
    return DownloadUrl(
        f"https://crates.io/api/v1/crates/{purl.name}/{purl.version}/download", "tarball"
    )


def nuget_download_url(purl):
    return DownloadUrl(f"https://nuget.org/packages/{purl.name}/{purl.version}/download", "zip")


def composer_download_url(purl):
    if not purl.namespace:
        return
    return DownloadUrl(f"https://repo.packagist.org/p2/{purl.namespace}/{purl.name}.json", "other")


def hex_download_url(purl):
    return DownloadUrl(f"https://repo.hex.pm/tarballs/{purl.name}-{purl.version}.tar", "tarball")


def pub_download_url(purl):
    return DownloadUrl(
        f"https://pub.dev/packages/{purl.name}/versions/{purl.version}.tar.gz", "tarball"
    )


def golang_download_url(purl):
    if not purl.namespace:
        return
    return DownloadUrl(
        f"https://proxy.golang.org/{purl.namespace}/{purl.name}/@v/{purl.version}.zip", "zip"
    )


DOWNLOAD_URL_BUILDERS = {
    "npm": npm_download_url,
    "pypi": pypi_download_url,
    "maven": maven_download_url,
    "gem": gem_download_url,
    "cargo": cargo_download_url,
    "nuget": nuget_download_url,
    "composer": composer_download_url,
    "hex": hex_download_url,
    "pub": pub_download_url,
    "golang": golang_download_url,
}


def to_repository_url(purl):
    """
    Return a RepositoryUrl for a ``purl`` PackageURL or None if it cannot be
    inferred for this purl type.
    """
    builder = REPOSITORY_URL_BUILDERS.get(purl.type)
    if builder:
        return builder(purl)


def to_download_url(purl):
    """
    Return a DownloadUrl for a ``purl`` PackageURL or None if it cannot be
    inferred for this purl type or if the purl has no version.
    """
    if not purl.version:
        return
    builder = DOWNLOAD_URL_BUILDERS.get(purl.type)
    if builder:
        return builder(purl)


def get_all_urls(purl):
    """
    Return a mapping with the "repository" RepositoryUrl and the "download"
    DownloadUrl of a ``purl`` PackageURL. Each can be None.
    """
    return {
        "repository": to_repository_url(purl),
        "download": to_download_url(purl),
    }


def supports_repository_url(purl_type):
    return purl_type in REPOSITORY_URL_BUILDERS


def supports_download_url(purl_type):
    return purl_type in DOWNLOAD_URL_BUILDERS
