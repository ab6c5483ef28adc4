#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from purlcode.builder import PackageURLBuilder
from purlcode.errors import PurlArgumentError
from purlcode.errors import PurlError
from purlcode.package_url import PackageURL
from purlcode.package_url import parse_string
from purlcode.result import Err
from purlcode.result import Ok

__version__ = "1.0.0"

__all__ = [
    "Err",
    "Ok",
    "PackageURL",
    "PackageURLBuilder",
    "PurlArgumentError",
    "PurlError",
    "parse_string",
]
