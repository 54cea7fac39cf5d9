#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Intent/context definition
#

import logging
from threading import local
from typing import Any, Dict, Callable, Optional

from .responses import ErrorResponse, Response, tell
from .sessions import Session

logger = logging.getLogger(__name__)

# Request types of the envelope
REQUEST_TYPE_LAUNCH = 'LaunchRequest'
REQUEST_TYPE_INTENT = 'IntentRequest'
REQUEST_TYPE_SESSION_ENDED = 'SessionEndedRequest'

# Spoken if a handler fails to reach the dictionary
SERVICE_ERROR_RESPONSE = 'Sorry, the Oxford service is experiencing a problem. Please try again later.'


class InvalidApplicationIdError(BaseException):
    """
    Error type raised in case the request comes from an application that is not allowed.
    """


def get_application_id(request_data: Dict) -> Optional[str]:
    """ Read application id from session, or from the system context if there is no session

    :param request_data:    request envelope
    :return:
    """
    session = request_data.get('session') or {}
    application = session.get('application') or {}
    if application.get('applicationId'):
        return application['applicationId']

    system = (request_data.get('context') or {}).get('System') or {}
    return (system.get('application') or {}).get('applicationId')


class Context:
    """
    A Context passed to the intent implementation callable with all kind of useful objects.

    :ivar request_type: type of the request: launch, intent or session ended
    :ivar request_id: unique id of the request
    :ivar intent_name: name of the intent that was called, `None` for launch and session ended requests
    :ivar locale: the language code for this request
    :ivar slots: slot values received with the intent, as {name: value}
    :ivar session: the session data
    :ivar application_id: id of the application that sent the request
    :ivar reason: the reason a session has ended (session ended requests only)
    """

    def __init__(self, request):
        self.request = request
        request_data = request.json
        envelope = request_data['request']
        self.version = request_data.get('version')
        self.request_type = envelope['type']
        self.request_id = envelope.get('requestId')
        self.locale = envelope.get('locale')
        self.reason = envelope.get('reason')

        intent = envelope.get('intent') or {}
        self.intent_name = intent.get('name')
        self.slots = {name: slot.get('value')
                      for name, slot in (intent.get('slots') or {}).items()
                      if isinstance(slot, dict)}

        self.application_id = get_application_id(request_data)

        session = request_data.get('session') or {}
        self.session = Session(session.get('sessionId'), session.get('new', not session),
                               session.get('attributes') or {})
        logger.debug('Session %s, new: %s', self.session.session_id, self.session.new_session)

        context.set_current(self)

    @property
    def session_id(self) -> Optional[str]:
        return self.session.session_id

    def get_slot(self, name: str, default=None) -> Optional[str]:
        """ Return slot value, or default if slot is missing or empty """
        return self.slots.get(name) or default

    def __repr__(self) -> str:
        return (f"Context(request_type={self.request_type!r}, request_id={self.request_id!r}, "
                f"intent_name={self.intent_name!r}, slots={self.slots!r}, session={dict(self.session)!r})")


class LocalContext:
    """ Context of the request handled by the current thread

        Attributes are read from the current context: ``context.request_id``
    """

    _thread_locals = local()

    def __getattr__(self, item):
        current = self.get_current()
        if current is None:
            raise AttributeError(f'{item!r}: no request is being handled')
        return getattr(current, item)

    @classmethod
    def get_current(cls) -> Optional[Context]:
        return getattr(cls._thread_locals, 'context', None)

    @classmethod
    def set_current(cls, ctx: Optional[Context]) -> None:
        cls._thread_locals.context = ctx


context = LocalContext()


class Intent:
    """ Handler registered for an intent name

        Calling the intent always returns a response:
            - a string result is spoken as TELL response
            - a failing remote call is answered with :py:const:`SERVICE_ERROR_RESPONSE`
            - any other exception is reported as internal error
    """

    def __init__(self, name: str, implementation: Callable[..., Any]):
        if not name:
            raise ValueError('Intent name is required.')
        if not callable(implementation):
            raise ValueError(f'Implementation of {name} must be callable.')

        self.name = name
        self.implementation = implementation

    @staticmethod
    def _as_response(result):
        if isinstance(result, str):
            return tell(result)
        if not isinstance(result, (Response, ErrorResponse)):
            logger.error('Handler returned %s, a response or string expected.', type(result))
            raise ValueError(f'Unknown return value: {result!r}')
        return result

    def __call__(self, _context: Context):
        from requests.exceptions import RequestException

        handler = self.implementation.__name__
        logger.info('Calling intent: %s', self.name)
        logger.debug('Calling %s with %s', handler, repr(_context))

        try:
            result = self.implementation(_context)
        except RequestException:
            logger.exception('Remote service failed while handling %s', self.name)
            return tell(SERVICE_ERROR_RESPONSE)
        except Exception as ex:
            logger.exception('%s failed while handling %s', handler, self.name)
            return ErrorResponse(999, f'{type(ex).__name__} in {handler} while handling {self.name}: {ex}')

        return self._as_response(result)

    def __repr__(self) -> str:
        return f"Intent(name={self.name!r}, implementation={self.implementation.__name__!r})"
