#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Requests session accepting a fixed set of status codes
#

import logging
from typing import Collection

from requests.exceptions import RequestException
from requests.sessions import Session

from .log import trim, prepare_for_logging
from .config import config

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 5


class BadHttpResponseCodeException(RequestException):
    """ Raised if the status code of a response is not one of the accepted codes """

    def __init__(self, status_code, *args, **kwargs):
        self.status_code = status_code
        super().__init__(*args, **kwargs)

    def __str__(self):
        if self.response is None:
            return f'Unexpected status code {self.status_code}'
        return f'Unexpected status code {self.status_code}: {trim(self.response.text)}'


class CheckedSession(Session):
    """ Requests session raising :py:class:`BadHttpResponseCodeException`
        when the status code is not in `good_codes`
    """

    DEFAULT_TIMEOUT = config.getfloat('requests', 'timeout', fallback=DEFAULT_REQUEST_TIMEOUT)

    def __init__(self, good_codes: Collection[int] = (200, ), timeout: float = None):
        super().__init__()
        self.good_codes = good_codes
        self.timeout = timeout or self.DEFAULT_TIMEOUT

    def request(self, method, url, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        logger.debug('HTTP %s %s', method.upper(), url)

        try:
            response = super().request(method, url, **kwargs)
        except RequestException as ex:
            logger.warning('HTTP %s %s failed: %s', method.upper(), url, ex)
            raise

        logger.debug('Request headers: %s', prepare_for_logging(dict(response.request.headers)))
        logger.debug('HTTP %s %s returned %d', method.upper(), url, response.status_code)
        if response.status_code not in self.good_codes:
            logger.warning('HTTP %s %s returned unexpected status code %d', method.upper(), url, response.status_code)
            raise BadHttpResponseCodeException(response.status_code, response=response)
        return response
