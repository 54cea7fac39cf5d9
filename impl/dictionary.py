#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Oxford Dictionaries lookup: fetch the entry of a word and turn it into speech
#

import json
import logging
from typing import Any, NamedTuple, Optional, Tuple
from urllib.parse import quote

from requests.exceptions import RequestException

from oxford_skill.config import config
from oxford_skill.intents import SERVICE_ERROR_RESPONSE
from oxford_skill.services.base import BaseService

logger = logging.getLogger(__name__)

# Oxford Dictionaries API endpoint and credentials
config.read_environment('OXFORD_API_URL', 'oxford', 'url')
config.read_environment('OXFORD_APP_ID', 'oxford', 'app_id')
config.read_environment('OXFORD_APP_KEY', 'oxford', 'app_key')

SERVICE_ERROR = SERVICE_ERROR_RESPONSE
NO_CATEGORY = '{word} has not been classified in any lexical category.'
CATEGORY = '{word} is {article} {category}.'
NO_DEFINITION = 'Sorry. I could not find any definition for the word {word}.'
DEFINITION = '{word} means {definition}.'
EXAMPLES_FOUND = " I've found some examples for {word}. Would you like to hear them?"

VOWELS = 'aeiou'


class WordDetails(NamedTuple):
    """ Information extracted from a dictionary entry """

    lexical_category: Optional[str] = None
    definition: Optional[str] = None
    examples: Tuple[str, ...] = ()


def _first(value: Any) -> Any:
    """ First element of a list, or `None` if value is not a non-empty list """
    return value[0] if isinstance(value, list) and value else None


def _get(value: Any, key: str) -> Any:
    """ Item of a dictionary, or `None` if value is not a dictionary """
    return value.get(key) if isinstance(value, dict) else None


def _text(value: Any) -> Optional[str]:
    """ Non-empty string or `None` """
    return value if isinstance(value, str) and value else None


def extract(payload: Any) -> WordDetails:
    """ Extract lexical category, definition and examples from the decoded response:

            results[0].lexicalEntries[0].lexicalCategory
            results[0].lexicalEntries[0].entries[0].senses[0].definitions[0]
            results[0].lexicalEntries[0].entries[0].senses[0].examples[*].text

        any missing node makes the value absent

    :param payload: decoded JSON
    :return:
    """
    lexical_entry = _first(_get(_first(_get(payload, 'results')), 'lexicalEntries'))
    sense = _first(_get(_first(_get(lexical_entry, 'entries')), 'senses'))

    examples = _get(sense, 'examples')
    examples = examples if isinstance(examples, list) else []

    return WordDetails(
        lexical_category=_text(_get(lexical_entry, 'lexicalCategory')),
        definition=_text(_first(_get(sense, 'definitions'))),
        examples=tuple(text for text in (_text(_get(example, 'text')) for example in examples) if text),
    )


def parse(body: str) -> WordDetails:
    """ Decode the response body and extract word details, malformed JSON reads as empty details

    :param body:
    :return:
    """
    try:
        payload = json.loads(body)
    except ValueError as ex:
        logger.error('Cannot decode dictionary response: %s', ex)
        return WordDetails()

    return extract(payload)


def describe(word: str, details: Optional[WordDetails]) -> Tuple[str, bool]:
    """ Speech text for the word details, `None` details mean the service has failed

    :param word:
    :param details:
    :return:    (speech, True if the user is asked to hear the examples)
    """
    if details is None:
        return SERVICE_ERROR, False

    category = details.lexical_category
    if category is None:
        speech = NO_CATEGORY.format(word=word)
    else:
        article = 'an' if category[0].lower() in VOWELS else 'a'
        speech = CATEGORY.format(word=word, article=article, category=category)

    if details.definition is None:
        speech += ' ' + NO_DEFINITION.format(word=word)
    else:
        speech += ' ' + DEFINITION.format(word=word, definition=details.definition)

    if details.examples:
        return speech + EXAMPLES_FOUND.format(word=word), True

    return speech, False


class OxfordService(BaseService):
    """ Oxford Dictionaries entries API """

    NAME = 'oxford'

    def __init__(self, url: str = None, app_id: str = None, app_key: str = None, **kwargs):
        self.BASE_URL = url or config.get('oxford', 'url')
        headers = {
            'app_id': app_id or config.get('oxford', 'app_id'),
            'app_key': app_key or config.get('oxford', 'app_key'),
        }
        super().__init__(headers=headers, **kwargs)

    def lookup(self, word: str) -> Optional[WordDetails]:
        """ Get the dictionary entry of a word

        :param word:
        :return:    word details or `None` if the service has failed or returned an empty body
        """
        url = self.url + quote(word)
        try:
            with self.session as session:
                response = session.get(url)
        except RequestException as ex:
            logger.warning('Dictionary lookup of %s failed: %s', repr(word), repr(ex))
            return None

        if not response.text:
            logger.warning('Dictionary lookup of %s returned an empty body', repr(word))
            return None

        details = parse(response.text)
        logger.debug('Dictionary lookup of %s: %s', repr(word), details)
        return details
