#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Opening and closing the conversation
#

import logging

from oxford_skill import skill, ssml, Context, Response, ask, tell
from oxford_skill.skill import FALLBACK_INTENT, LAUNCH_INTENT, SESSION_ENDED_INTENT

logger = logging.getLogger(__name__)

EXIT_INTENTS = ('AMAZON.StopIntent', 'AMAZON.CancelIntent', 'AMAZON.NoIntent')

WHAT_WORD = 'What word would you like information for?'
WELCOME = ssml.speak('Welcome to Oxford Word Look up. ' + WHAT_WORD)
WELCOME_REPROMPT = ('I can provide you information for any specific word. '
                    'You can simply open Oxford Word Look up and ask a question like, '
                    'what is the meaning of and say the word you are looking for. ' + WHAT_WORD)
GOODBYE = 'Thank you for using Oxford Word Look up. Goodbye.'
UNSUPPORTED = 'This is unsupported. Please try something else.'


@skill.intent_handler(LAUNCH_INTENT)
def welcome() -> Response:
    """ Skill opened without a question """
    return ask(WELCOME, reprompt=WELCOME_REPROMPT)


def goodbye() -> Response:
    """ Stop, cancel, or "no" to hearing the examples """
    return tell(GOODBYE)


for name in EXIT_INTENTS:
    skill.intent_handler(name)(goodbye)


@skill.intent_handler(FALLBACK_INTENT)
def unsupported() -> Response:
    return ask(UNSUPPORTED, reprompt=UNSUPPORTED)


@skill.intent_handler(SESSION_ENDED_INTENT)
def session_ended(context: Context) -> Response:
    """ Nothing to say, the session is already closed """
    logger.debug('Session %s ended: %s', context.session_id, context.reason)
    return Response()
