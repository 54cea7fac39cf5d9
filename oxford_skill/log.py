#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Logging
#

import os
import time
import json
import logging
from typing import Any, Dict

from .config import config

# Default log level: DEBUG
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")

# Default log format: GELF
LOG_FORMAT = os.environ.get('LOG_FORMAT', 'gelf')

# Maximal length of a string to log
LOG_ENTRY_MAX_STRING = 253

# Request headers and values never written to the log
HIDDEN_KEYS = ('app_id', 'app_key', 'accessToken', 'apiAccessToken')
HIDDEN_VALUE = '*****'


logging.basicConfig(level=LOG_LEVEL)


class GELFFormatter(logging.Formatter):
    """ Graylog Extended Format (GELF): one JSON object per line,
        with the ids of the request being handled by the current thread
    """

    def format(self, record):
        from .intents import LocalContext
        current = LocalContext.get_current()

        line = {
            "@timestamp": int(round(time.time() * 1000)),
            "level": record.levelname,
            "process": record.process,
            "thread": str(record.thread),
            "logger": record.name,
            "message": record.getMessage(),
            "requestId": getattr(current, 'request_id', None),
            "sessionId": getattr(current, 'session_id', None),
            # Skill name in place of a tenant
            "tenant": config.get('skill', 'name'),
        }
        if record.exc_info:
            line['_traceback'] = self.formatException(record.exc_info)

        return json.dumps(line)


def logging_config(log_format: str = LOG_FORMAT, level: str = LOG_LEVEL) -> Dict[str, Any]:
    """ Configuration for `logging.config.dictConfig`

    :param log_format:  "gelf" for JSON lines, "human" for plain text
    :param level:       root log level
    :return:
    """
    handler = {'class': 'logging.StreamHandler', 'level': level}
    formatters = {}
    if log_format == 'gelf':
        formatters['gelf'] = {'()': GELFFormatter}
        handler['formatter'] = 'gelf'

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': formatters,
        'handlers': {'default': handler},
        'root': {'handlers': ['default'], 'level': level},
        # urllib3 is too chatty on debug level
        'loggers': {'urllib3': {'level': 'WARNING'}},
    }


#
#   Under Windows we're going to run without Gunicorn anyway
#
try:
    from gunicorn.glogging import Logger

    class GunicornLogger(Logger):
        """ Gunicorn error and access logs in GELF format """

        def setup(self, cfg):
            self.loglevel = getattr(logging, LOG_LEVEL)
            self.error_log.setLevel(self.loglevel)
            self.error_log.name = 'gunicorn'
            self.access_log.setLevel(logging.INFO)

            for log in (self.error_log, self.access_log):
                self._set_handler(log, cfg.errorlog, GELFFormatter())

# Handle `no module named 'fcntl'`
except ModuleNotFoundError:         # pragma: no cover
    pass


def trim(value):
    """ Cut strings longer than LOG_ENTRY_MAX_STRING, marking the cut with "..." """
    if isinstance(value, str) and len(value) >= LOG_ENTRY_MAX_STRING:
        return value[:LOG_ENTRY_MAX_STRING] + '...'
    return value


def _masked(value):
    if isinstance(value, dict):
        return {key: HIDDEN_VALUE if key in HIDDEN_KEYS else _masked(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_masked(item) for item in value]
    return trim(value)


def prepare_for_logging(request):
    """ Copy of a request (or headers) dictionary with credentials hidden and long strings trimmed

    :param request:
    :return:
    """
    return _masked(request) if isinstance(request, dict) else request
