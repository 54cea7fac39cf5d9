#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Read skill configuration file
#

import os
import re
import logging
import configparser
from pathlib import Path
from typing import List

#
#   This is a default configuration
#   Loaded when config instantiated
#

DEFAULT_VALUES = {
    'skill': {
        'name': 'oxford',
        'version': 1.0,
        'application_ids': '${SKILL_APPLICATION_ID:}',
    },
    'http': {
        'host': '0.0.0.0',
        'port': 4242,
        'server': 'gunicorn',
        'workers': 1,
        'threads': 1,
        'worker_class': 'sync',
        'keepalive': 30,
    },
    'oxford': {
        'url': '${OXFORD_API_URL:https://od-api.oxforddictionaries.com/api/v1/entries/en/}',
        'app_id': '${OXFORD_APP_ID:}',
        'app_key': '${OXFORD_APP_KEY:}',
    },
}

# Name of default config file
DEFAULT_CONFIG_FILE = 'skill.conf'

# Filesystem paths to look for config
SEARCH_PATH = [Path('./'), Path('../'), Path('/'), Path('~')]

ENV_VAR_TEMPLATE = re.compile(r'\${([^}^{]+)\}')

logger = logging.getLogger(__name__)


def get_config_file():
    """ Read config file name from environment """
    return os.environ.get('SKILL_CONF', DEFAULT_CONFIG_FILE)


class EnvVarInterpolation(configparser.BasicInterpolation):
    """ Expands environment variables in config values:

            [section]
            key = ${ENV_VAR:default}

        Unset or empty variables are replaced by the default (or empty string if there is none)
    """

    @staticmethod
    def _expand(match) -> str:
        env_var, _, default = match.group(1).partition(':')
        value = os.getenv(env_var)
        if not value:
            logger.debug('%s is not set, using default: %s', env_var, repr(default))
        return value or default

    def before_get(self, parser, section, option, value, defaults):
        return os.path.expandvars(ENV_VAR_TEMPLATE.sub(self._expand, value))


class Config(configparser.ConfigParser):
    """ Skill configuration: built-in defaults overridden by `skill.conf` and the environment

        Sections: [skill], [http] (WSGI server), [oxford] (dictionary endpoint and credentials),
        [requests] and [tests]
    """

    def __init__(self):
        super().__init__(interpolation=EnvVarInterpolation())
        self.config_files: List[str] = []
        self.read_dict(DEFAULT_VALUES)
        self.read_conf()

    def read_conf(self, config_file: str = None) -> 'Config':
        """ Read `config_file` (default: $SKILL_CONF or "skill.conf") found in the search paths, later paths win

        :param config_file:
        :return:    self
        """
        name = config_file or get_config_file()
        self.config_files = self.read([path.expanduser() / name for path in SEARCH_PATH])
        if self.config_files:
            logger.info('Configuration read from %s', ', '.join(self.config_files))
        else:
            logger.info('No configuration file %s found, using defaults', name)
        return self

    def read_environment(self, env: str, section: str, option: str) -> 'Config':
        """ Set `option` in `section` from environment variable `env`, if the variable is not empty """
        if os.environ.get(env):
            self.set(section, option, os.environ[env])
        return self

    def get_list(self, section: str, option: str, fallback: str = '') -> List[str]:
        """ Comma or line separated values as list

        :param section:
        :param option:
        :param fallback:    used if the option is missing
        :return:
        """
        value = self.get(section, option, fallback=fallback) or ''
        return [item.strip() for item in value.replace('\n', ',').split(',') if item.strip()]

    def application_ids(self) -> List[str]:
        """ Application ids the skill accepts requests from

        :return:
        """
        return self.get_list('skill', 'application_ids')


config = Config()
