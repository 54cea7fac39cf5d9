#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Invoke request session
#

import json
import logging
from typing import Iterable, List


MAX_SESSION_STORAGE_SIZE = 4096

# Session attribute holding the usage examples of the last looked up word
EXAMPLES_KEY = 'examples'

logger = logging.getLogger(__name__)


class SessionOversizeError(Exception):
    """ Setting the value would make the session larger than :py:const:`MAX_SESSION_STORAGE_SIZE` """


class SessionInvalidKeyError(Exception):
    """ Session key is an empty string """


class Session(dict):
    """ Session attributes, kept by the voice platform between the turns of one conversation

        Keys are non-empty strings, values are strings or lists of strings (anything else is converted),
        and the JSON encoded attributes never exceed :py:const:`MAX_SESSION_STORAGE_SIZE` bytes.

        The session is accessible as ``context.session`` in the intent handler.
    """

    def __init__(self, session_id, new_session, *args, **kwargs):
        self.session_id = session_id
        self.new_session = new_session
        super().__init__(*args, **kwargs)

    @staticmethod
    def _convert(value):
        if isinstance(value, (list, tuple)):
            return [item if isinstance(item, str) else str(item) for item in value]
        return value if isinstance(value, str) else str(value)

    def get_storage_size(self) -> int:
        size = len(json.dumps(self))
        logger.debug('Size of session %s is now %s', self.session_id, size)
        return size

    def update(self, e=None, **kwargs):
        """ Set the values one by one, enforcing the limits """
        for key, value in dict(e or {}, **kwargs).items():
            self[key] = value

    def __setitem__(self, key, value):
        key = str(key)
        if not key:
            raise SessionInvalidKeyError('Session key can not be empty strings')

        missing = object()
        previous = self.get(key, missing)
        super().__setitem__(key, self._convert(value))

        size = self.get_storage_size()
        if size > MAX_SESSION_STORAGE_SIZE:
            if previous is missing:
                super().__delitem__(key)
            else:
                super().__setitem__(key, previous)
            raise SessionOversizeError(f'Storing {repr(key)} makes the session {size} bytes, '
                                       f'the limit is {MAX_SESSION_STORAGE_SIZE}.')


class ExampleStore:
    """ Usage examples kept in the session between the lookup and the "yes" turn """

    def __init__(self, session: Session, key: str = EXAMPLES_KEY):
        self.session = session
        self.key = key

    def get_examples(self) -> List[str]:
        """ Read the stored examples, anything but a list of strings reads as empty

        :return:
        """
        value = self.session.get(self.key)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            if value is not None:
                logger.warning('Unexpected value stored under %s: %s', repr(self.key), repr(value))
            return []
        return list(value)

    def set_examples(self, examples: Iterable[str]) -> None:
        """ Replace the stored examples

        :param examples:
        :return:
        """
        self.session[self.key] = list(examples)

    def clear_examples(self) -> None:
        self.session.pop(self.key, None)
