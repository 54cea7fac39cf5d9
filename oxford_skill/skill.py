#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Skill application: intent registry on top of a Bottle app
#

import logging
import logging.config
from typing import Callable, Dict, Optional

import bottle
from bottle import app

from . import decorators
from . import intents
from . import responses
from .config import config

logger = logging.getLogger(__name__)

# Handler for any intent without its own handler
FALLBACK_INTENT = 'FALLBACK_INTENT'

# Handler names for the requests that carry no intent
LAUNCH_INTENT = intents.REQUEST_TYPE_LAUNCH
SESSION_ENDED_INTENT = intents.REQUEST_TYPE_SESSION_ENDED


def initialize(config_file: str = None, dev: bool = False) -> 'Skill':
    """ Prepare the default app to serve requests: read configuration, set up logging and routes

    :param config_file: configuration file, "skill.conf" if not set
    :param dev:         serve with bottle's WSGIRefServer on localhost
    :return:
    :raises RuntimeError: if no handlers are registered
    """
    config.read_conf(config_file)
    configure_logging()

    skill = app()
    if not skill.get_intents():
        raise RuntimeError('No intent handlers registered: is the skill module imported?')

    if not config.application_ids():
        logger.warning('No application_ids in skill.conf: accepting requests from any application.')

    from . import routes    # noqa: F401 registers the endpoint with the default app

    if dev:
        set_dev_mode()

    skill.config.load_dict({section: dict(config.items(section)) for section in config.sections()})
    return skill


def configure_logging() -> None:
    from . import log

    logging.config.dictConfig(log.logging_config())
    if log.LOG_FORMAT == 'gelf':
        config.set('http', 'logger_class', 'oxford_skill.log.GunicornLogger')

    # bottle prints to stdout/stderr
    bottle_logger = logging.getLogger('bottle')
    bottle._stdout = bottle_logger.debug
    bottle._stderr = bottle_logger.info


def set_dev_mode() -> None:
    logger.warning('Development mode: serving with WSGIRefServer on localhost.')
    config.set('http', 'server', 'wsgiref')
    config.set('http', 'host', 'localhost')


class Skill(bottle.Bottle):
    """ Bottle app dispatching requests to the registered handlers """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._intents: Dict[str, intents.Intent] = {}

    def get_intents(self) -> Dict[str, intents.Intent]:
        return self._intents

    def get_intent(self, name: str) -> Optional[intents.Intent]:
        """ Handler registered for intent name, or the fallback handler """
        intent = self._intents.get(name)
        if intent is None:
            logger.debug('No handler for %s, using fallback.', repr(name))
            intent = self._intents.get(FALLBACK_INTENT)
        return intent

    def get_handler(self, context: intents.Context) -> Optional[intents.Intent]:
        """ Intent requests are dispatched by intent name, launch and session end by request type

        :param context:
        :return:
        """
        if context.request_type == intents.REQUEST_TYPE_INTENT:
            return self.get_intent(context.intent_name)
        return self._intents.get(context.request_type)

    def intent_handler(self, name: str) -> Callable:
        """ Register the decorated function as handler for intent `name`

            @skill.intent_handler('OneshotOxfordIntent')
            def oneshot(context: Context, Word: str):
                ...

        :param name:
        :return:
        :raises ValueError: if intent already has a handler
        """
        def register(func: Callable) -> Callable:
            if name in self._intents:
                raise ValueError(f'Duplicate intent {name} with handler {func}')
            handler = decorators.intent_handler(func)
            self._intents[name] = intents.Intent(name, handler)
            return handler
        return register

    def test_intent(self, name: str, **kwargs) -> responses.Response:
        """ Invoke the handler of intent `name` with slot values and session from `kwargs`

            skill.test_intent('AMAZON.YesIntent', session={'examples': ['runs fast']})
        """
        from .test_helpers import invoke_intent
        return invoke_intent(name, skill=self, **kwargs)

    def run(self, **kwargs):
        """ Serve with the [http] configuration, `kwargs` take precedence """
        options = {**dict(config.items('http')), **kwargs}
        logger.info('Starting server %s on %s:%s', options.get('server'), options.get('host'), options.get('port'))
        logger.debug('Server options: %s', options)
        super().run(**options)


def run(config_file: str = None, dev: bool = False, **kwargs):
    """ Initialize and serve the default app """
    initialize(config_file=config_file, dev=dev).run(**kwargs)


def intent_handler(name: str) -> Callable:
    """ Register handler with the default app """
    return app().intent_handler(name)


def test_intent(name: str, **kwargs) -> responses.Response:
    """ Invoke handler of the default app """
    return app().test_intent(name, **kwargs)


app.push(Skill())
