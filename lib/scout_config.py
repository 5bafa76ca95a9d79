# =========================================================================
#   pyScout - Expectation-driven Mocks for Python
#
#   Copyright (c) 2025 Christian Renzel
#   SPDX-License-Identifier: MIT
# =========================================================================

import logging

import yaml

logger = logging.getLogger(__name__)


class ScoutConfig:
    SCOUT_DEFAULT_OPTIONS = {
        ':plugins': [],
        ':fail_on_unexpected_calls': True,
        ':failure_mode': ':raise',      # options: raise, collect
        ':callback_include_count': False,
        ':verbosity': 2,                # 0: errors only, 1: warnings, 2: normal, 3: verbose
    }

    def __init__(self, options=None):
        if options is None:
            self.options = self.SCOUT_DEFAULT_OPTIONS.copy()
        elif isinstance(options, str):
            self.options = {**self.SCOUT_DEFAULT_OPTIONS, **self.load_config_file_from_yaml(options)}
        elif isinstance(options, dict):
            self.options = {**self.SCOUT_DEFAULT_OPTIONS, **options}
        else:
            raise ValueError("Options should be a filename (str) or a dictionary (dict)")

        if not isinstance(self.options.get(':plugins'), list):
            self.options[':plugins'] = []
            if self.options.get(':verbosity', 2) > 0:
                logger.warning("':plugins' should be a list.")

        self.options[':plugins'] = list(map(lambda x: str(x).lower().lstrip(':'), filter(None, self.options[':plugins'])))

        if self.options[':failure_mode'] not in (':raise', ':collect'):
            raise ValueError(f"Unknown ':failure_mode' {self.options[':failure_mode']!r}")

        if 'ignore' not in self.options[':plugins'] and not self.options[':fail_on_unexpected_calls']:
            raise ValueError("The 'ignore' plugin is required to disable 'fail_on_unexpected_calls'")

    def load_config_file_from_yaml(self, yaml_filename):
        try:
            with open(yaml_filename, 'r') as file:
                data = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing YAML file {yaml_filename}: {e}")

        return (data or {}).get(':scout', {})

    @property
    def plugins(self):
        return self.options[':plugins']

    @property
    def fail_on_unexpected_calls(self):
        return self.options[':fail_on_unexpected_calls']

    @property
    def failure_mode(self):
        return self.options[':failure_mode']

    @property
    def callback_include_count(self):
        return self.options[':callback_include_count']

    @property
    def verbosity(self):
        return self.options[':verbosity']
