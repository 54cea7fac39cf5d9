#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Bottle route definitions
#

import logging
from json import JSONDecodeError

from bottle import app, post, request, error, HTTPError

from .config import config
from .intents import Context, InvalidApplicationIdError, REQUEST_TYPE_LAUNCH, REQUEST_TYPE_SESSION_ENDED
from .responses import ErrorResponse

from . import log

logger = logging.getLogger(__name__)


def api_base():
    """ Get API base """
    return config.get('skill', 'api_base', fallback=f"/v1/{config.get('skill', 'name')}")


def verify_application_id(context: Context) -> None:
    """ Check the application id of the request against allow-list in `skill.conf`

    :param context:
    :return:
    :raises InvalidApplicationIdError:  if the application is not allowed
    """
    allowed = config.application_ids()
    if allowed and context.application_id not in allowed:
        raise InvalidApplicationIdError(context.application_id)


def log_lifecycle(context: Context) -> None:
    """ Log session start, launch and session end """

    if context.session.new_session:
        logger.info('onSessionStarted requestId=%s, sessionId=%s', context.request_id, context.session_id)

    if context.request_type == REQUEST_TYPE_LAUNCH:
        logger.info('onLaunch requestId=%s, sessionId=%s', context.request_id, context.session_id)
    elif context.request_type == REQUEST_TYPE_SESSION_ENDED:
        logger.info('onSessionEnded requestId=%s, sessionId=%s, reason=%s',
                    context.request_id, context.session_id, context.reason)
    else:
        logger.info('onIntent requestId=%s, sessionId=%s, intent=%s',
                    context.request_id, context.session_id, context.intent_name)


@post(api_base())
def invoke():
    """ Invoke intent endpoint:

        returns intent call result or ErrorResponse
    """

    logger.debug('Handling intent call request.')

    try:
        logger.debug('Request data: %s', log.prepare_for_logging(request.json))
        context = Context(request)
        verify_application_id(context)
        log_lifecycle(context)

        handler = app().get_handler(context)
        if handler:
            result = handler(context).as_response(context)
            logger.debug('Intent call result: %s', result.body)
        else:
            result = ErrorResponse(1, 'intent not found').as_response()
            logger.error('Handler not found: %s/%s', context.request_type, context.intent_name)

    except InvalidApplicationIdError as ex:
        logger.error('Invalid application id: %s', ex)
        result = ErrorResponse(2, 'invalid application id').as_response()
    except (HTTPError, JSONDecodeError, AttributeError, KeyError, TypeError):
        logger.exception('Bad request.')
        result = ErrorResponse(3, 'Bad request').as_response()
    except Exception:
        logger.exception('Internal error.')
        result = ErrorResponse(999, 'internal error').as_response()

    return result


def json_error(code: int, text: str):
    """ Bottle error handler answering with :py:class:`ErrorResponse` """

    def handler(err):
        logger.warning('HTTP %s: %s', err.status, text)
        logger.debug('Error: %s', err)
        return ErrorResponse(code, text).as_response()
    return handler


for status, code, text in ((400, 3, 'Bad request'), (404, 1, 'Not found'), (500, 999, 'internal error')):
    error(status)(json_error(code, text))
