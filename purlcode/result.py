#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

from dataclasses import dataclass
from typing import Any

from purlcode.errors import PurlArgumentError
from purlcode.errors import PurlError

"""
A Result is either an Ok with a value or an Err with an error. This is used by
the non-raising ``try_*`` PackageURL API.

For example::
>>> ok(2).map(lambda v: v * 10).unwrap()
20
>>> err(PurlError("bad")).map(lambda v: v * 10).unwrap_or(0)
0
"""


@dataclass(frozen=True)
class Ok:
    value: Any

    def is_ok(self):
        return True

    def is_err(self):
        return False

    def unwrap(self):
        return self.value

    def unwrap_or(self, default):
        return self.value

    def unwrap_or_else(self, func):
        return self.value

    def map(self, func):
        """
        Return a new Ok with the ``func`` callable applied to this value.
        """
        return Ok(func(self.value))

    def map_err(self, func):
        return self

    def and_then(self, func):
        """
        Return the Result returned by the ``func`` callable applied to this value.
        """
        return func(self.value)

    def or_else(self, func):
        return self


@dataclass(frozen=True)
class Err:
    error: Any

    def is_ok(self):
        return False

    def is_err(self):
        return True

    def unwrap(self):
        """
        Raise this error. An error that is not an exception is raised as a
        ValueError.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(str(self.error))

    def unwrap_or(self, default):
        return default

    def unwrap_or_else(self, func):
        return func(self.error)

    def map(self, func):
        return self

    def map_err(self, func):
        """
        Return a new Err with the ``func`` callable applied to this error.
        """
        return Err(func(self.error))

    def and_then(self, func):
        return self

    def or_else(self, func):
        """
        Return the Result returned by the ``func`` callable applied to this error.
        """
        return func(self.error)


def ok(value):
    return Ok(value)


def err(error):
    return Err(error)


def result_from(func, *args, **kwargs):
    """
    Return an Ok with the value returned by calling ``func`` with ``args`` and
    ``kwargs`` or an Err with the PurlError or PurlArgumentError it raised.
    Any other exception is propagated.

    For example::
    >>> result_from(int, "12")
    Ok(value=12)
    >>> def invalid():
    ...     raise PurlError("nope")
    >>> result_from(invalid).is_err()
    True
    """
    try:
        return Ok(func(*args, **kwargs))
    except (PurlError, PurlArgumentError) as e:
        return Err(e)


def all_ok(results):
    """
    Return an Ok with the list of values of all ``results`` or the first Err.

    For example::
    >>> all_ok([ok(1), ok(2)])
    Ok(value=[1, 2])
    >>> all_ok([ok(1), err("a"), err("b")])
    Err(error='a')
    """
    values = []
    for result in results:
        if result.is_err():
            return result
        values.append(result.value)
    return Ok(values)


def any_ok(results):
    """
    Return the first Ok of ``results``, or the last Err if there is no Ok, or
    None if there are no ``results``.

    For example::
    >>> any_ok([err("a"), ok(2), ok(3)])
    Ok(value=2)
    >>> any_ok([err("a"), err("b")])
    Err(error='b')
    """
    last_error = None
    for result in results:
        if result.is_ok():
            return result
        last_error = result
    return last_error
