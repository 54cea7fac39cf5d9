#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#
#

#
# Base service
#

import logging
from functools import partial
from typing import Dict, Optional

from oxford_skill.log import prepare_for_logging
from oxford_skill.requests import CheckedSession

logger = logging.getLogger(__name__)


class BaseService:
    """ The base for remote services """

    # Service URL
    BASE_URL: Optional[str] = None

    # Service name
    NAME: str = 'base'

    # Status codes accepted as success, any other code fails the request
    GOOD_CODES = (200, )

    # Timeout value
    timeout = CheckedSession.DEFAULT_TIMEOUT

    def __init__(self, headers: Dict = None, timeout: float = None):
        self.headers = headers or {}
        self.timeout = timeout or self.timeout

    def _headers(self) -> Dict:
        """ Returns request headers

        :return:
        """
        if self.headers:
            # Hide credentials when logging
            logger.debug(f'Additional headers: {prepare_for_logging(self.headers)}')

        return {
            'Accept': 'application/json',
            **self.headers
        }

    @property
    def url(self) -> str:
        """ Service endpoint URL, always ending with slash """

        if not self.BASE_URL:
            raise ValueError(f'BASE_URL for Service {self.__class__.__name__} not set.')
        return self.BASE_URL.rstrip('/') + '/'

    @property
    def session(self) -> CheckedSession:
        """ Creates and returns new session checking the status codes """

        _session = CheckedSession(good_codes=self.GOOD_CODES, timeout=self.timeout)
        _session.request = partial(_session.request, headers=self._headers(), timeout=self.timeout)
        return _session
