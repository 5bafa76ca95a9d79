#!/usr/bin/env python3
# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

import sys
import argparse

from scout_config import ScoutConfig
from scout_mock import Mock
from scout_plugin_manager import ScoutPluginManager


class Scout:
    """
    Shares one configuration and plugin set between the mocks it creates.
    Every mock still owns its own expectation registry.
    """
    def __init__(self, options=None):
        self.config = ScoutConfig(options)
        self.plugins = ScoutPluginManager(self.config)

    def create_mock(self):
        return Mock(self.config, self.plugins)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scout - Expectation-driven Mocks for Python")
    parser.add_argument('-o', '--options', help="Options file", required=False)
    parser.add_argument('--version', action='store_true', help="Show version")
    parser.add_argument('--list-plugins', action='store_true', help="Show the plugins the options load")

    args = parser.parse_args(argv)

    if args.version:
        from scout_version import SCOUT_VERSION
        print(SCOUT_VERSION)
        return 0

    try:
        scout = Scout(args.options)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.list_plugins:
        for name in scout.plugins.names:
            print(name)
    else:
        for key, value in sorted(scout.config.options.items()):
            print(f"{key} {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
