#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

PURL_ERROR_PREFIX = "invalid purl: "


def format_purl_error_message(message=""):
    """
    Return a purl error message built from a ``message`` reason: the first
    letter is lowercased and a single trailing period is removed.

    For example::
    >>> format_purl_error_message("The type is missing.")
    'invalid purl: the type is missing'
    >>> format_purl_error_message("wait...")
    'invalid purl: wait...'
    >>> format_purl_error_message()
    'invalid purl: '
    """
    formatted = message or ""
    if formatted:
        first = formatted[0]
        if "A" <= first <= "Z":
            formatted = first.lower() + formatted[1:]
        if len(formatted) > 1 and formatted.endswith(".") and formatted[-2] != ".":
            formatted = formatted[:-1]
    return f"{PURL_ERROR_PREFIX}{formatted}"


class PurlError(ValueError):
    """
    Raised when a purl or one of its components violates a purl rule.
    """

    def __init__(self, message=""):
        self.reason = message
        super().__init__(format_purl_error_message(message))


class PurlArgumentError(ValueError):
    """
    Raised when a public function receives an argument of the wrong shape.
    """
