#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

SCHEME = "pkg"

# Components in their canonical serialization order.
PURL_COMPONENTS = (
    "type",
    "namespace",
    "name",
    "version",
    "qualifiers",
    "subpath",
)


class KnownQualifierNames:
    """
    Well known qualifier keys.
    See https://github.com/package-url/purl-spec/blob/master/PURL-SPECIFICATION.rst#known-qualifiers-keyvalue-pairs
    """

    REPOSITORY_URL = "repository_url"
    DOWNLOAD_URL = "download_url"
    VCS_URL = "vcs_url"
    FILE_NAME = "file_name"
    CHECKSUM = "checksum"

    @classmethod
    def names(cls):
        return (
            cls.REPOSITORY_URL,
            cls.DOWNLOAD_URL,
            cls.VCS_URL,
            cls.FILE_NAME,
            cls.CHECKSUM,
        )
