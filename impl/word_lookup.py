#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Word look up dialog: the user says a word, we read the definition
# and offer to read the examples in the next turn
#

import logging
from typing import Iterable

from oxford_skill import skill, Card, Context, ExampleStore, Response, ask, tell
from oxford_skill.sessions import SessionOversizeError

from .dictionary import OxfordService, describe

logger = logging.getLogger(__name__)

ONESHOT_INTENT = 'OneshotOxfordIntent'
DIALOG_INTENT = 'DialogOxfordIntent'
YES_INTENT = 'AMAZON.YesIntent'

CARD_TITLE = 'Oxford Word Look Up'
EXAMPLES_REPROMPT = "I'm sorry, I didn't understand what you said. Would you like to hear some examples?"
ASK_FOR_WORD = 'Please try again by saying a word.'
NO_EXAMPLES = "Sorry, I don't have any examples to read."
EXAMPLE = 'Example {number}: {text}. '


def look_up(context: Context, word: str) -> Response:
    """ Look up the word, keep the examples in session if there are any and ask if user wants to hear them

    :param context:
    :param word:
    :return:
    """
    details = OxfordService().lookup(word)
    speech, awaiting_answer = describe(word, details)

    if awaiting_answer:
        store = ExampleStore(context.session)
        try:
            store.set_examples(details.examples)
            return ask(speech, reprompt=EXAMPLES_REPROMPT, card=Card(CARD_TITLE, speech))
        except SessionOversizeError:
            # Examples we cannot keep are not offered
            logger.warning('%d examples for %s do not fit in session', len(details.examples), repr(word))
            store.clear_examples()
            speech, _ = describe(word, details._replace(examples=()))

    return tell(speech, card=Card(CARD_TITLE, speech))


def read_examples(examples: Iterable[str]) -> str:
    """ Number the examples starting from 1

    :param examples:
    :return:
    """
    return ''.join(EXAMPLE.format(number=number, text=text) for number, text in enumerate(examples, start=1))


@skill.intent_handler(ONESHOT_INTENT)
def oneshot(context: Context, Word: str) -> Response:
    """ The word comes with the first utterance: "what is the meaning of set"

    :param context:
    :param Word:    the word to look up
    :return:
    """
    if not Word:
        return ask(ASK_FOR_WORD, reprompt=ASK_FOR_WORD)
    return look_up(context, Word)


@skill.intent_handler(DIALOG_INTENT)
def dialog(context: Context, Word: str) -> Response:
    """ Multi-turn look up: ask for the word if it's not there yet

    :param context:
    :param Word:    the word to look up
    :return:
    """
    if not Word:
        return ask(ASK_FOR_WORD, reprompt=ASK_FOR_WORD)
    return look_up(context, Word)


@skill.intent_handler(YES_INTENT)
def yes(context: Context) -> Response:
    """ User wants to hear the examples stored with the previous look up

    :param context:
    :return:
    """
    examples = ExampleStore(context.session).get_examples()
    if not examples:
        return tell(NO_EXAMPLES)

    speech = read_examples(examples)
    return tell(speech, card=Card(CARD_TITLE, speech))
