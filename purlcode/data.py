#
# Copyright (c) AboutCode and others. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# See http://www.apache.org/licenses/LICENSE-2.0 for the license text.
# See https://github.com/aboutcode-org/purlcode for support or download.
# See https://aboutcode.org for more information about our open source projects.
#

import logging
import os
from functools import lru_cache
from pathlib import Path

import saneyaml
import yaml

logger = logging.getLogger(__name__)

"""
Read-only word lists used by the npm type rules:

- builtin names: the Node.js core module names that an npm package cannot use.
- legacy names: the npm package names published before the current naming rules
  and exempted from them.

Each list is a YAML list of strings stored in the data directory. This directory
defaults to the "data" directory of this package and can be overridden with the
PURLCODE_DATA_DIR environment variable.
"""

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"

NPM_BUILTIN_NAMES_FILENAME = "npm/builtin-names.yml"
NPM_LEGACY_NAMES_FILENAME = "npm/legacy-names.yml"

FALLBACK_NPM_BUILTIN_NAMES = frozenset(
    [
        "assert",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "domain",
        "events",
        "fs",
        "http",
        "http2",
        "https",
        "inspector",
        "module",
        "net",
        "os",
        "path",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "repl",
        "stream",
        "string_decoder",
        "sys",
        "timers",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    ]
)

FALLBACK_NPM_LEGACY_NAMES = frozenset(
    [
        "assert",
        "buffer",
        "crypto",
        "events",
        "fs",
        "http",
        "os",
        "path",
        "url",
        "util",
    ]
)


def get_data_dir():
    """
    Return the directory Path where word lists are stored.
    """
    data_dir = os.environ.get("PURLCODE_DATA_DIR")
    if data_dir:
        return Path(data_dir)
    return DEFAULT_DATA_DIR


def load_names(location, fallback):
    """
    Return a frozenset of names loaded from the YAML list at ``location`` or
    the ``fallback`` frozenset if this file cannot be loaded.
    """
    location = Path(location)
    try:
        names = saneyaml.load(location.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load names from {str(location)!r}, using defaults: {e!r}")
        return fallback

    if not isinstance(names, list):
        logger.warning(f"Invalid names list in {str(location)!r}, using defaults.")
        return fallback

    logger.debug(f"Loaded {len(names)} names from {str(location)!r}")
    return frozenset(str(name) for name in names)


def load_builtin_names(location=None):
    """
    Return a frozenset of Node.js builtin module names loaded from an optional
    ``location`` YAML file or the default data directory.
    """
    location = location or get_data_dir() / NPM_BUILTIN_NAMES_FILENAME
    return load_names(location, FALLBACK_NPM_BUILTIN_NAMES)


def load_legacy_names(location=None):
    """
    Return a frozenset of legacy npm package names loaded from an optional
    ``location`` YAML file or the default data directory.
    """
    location = location or get_data_dir() / NPM_LEGACY_NAMES_FILENAME
    return load_names(location, FALLBACK_NPM_LEGACY_NAMES)


@lru_cache(maxsize=None)
def get_npm_builtin_names():
    return load_builtin_names()


@lru_cache(maxsize=None)
def get_npm_legacy_names():
    return load_legacy_names()


def is_npm_builtin_name(npm_id):
    return npm_id.lower() in get_npm_builtin_names()


def is_npm_legacy_name(npm_id):
    return npm_id in get_npm_legacy_names()
