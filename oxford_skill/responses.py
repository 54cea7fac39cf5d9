#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Skill responses
#

import json
from typing import Any, Dict, Optional

from bottle import HTTPResponse

from . import ssml
from .__version__ import __envelope_version__

# : keeps the session open waiting for an answer
RESPONSE_TYPE_ASK = 'ASK'

# : closes the session
RESPONSE_TYPE_TELL = 'TELL'

# : card with a title and plain text content
CARD_TYPE_SIMPLE = 'Simple'

JSON_HEADERS = {'Content-type': 'application/json'}


def output_speech(text: str) -> Dict[str, str]:
    """ Output speech object: SSML if the text is wrapped in <speak/> tag, plain text otherwise """
    if ssml.is_ssml(text):
        return {'type': 'SSML', 'ssml': text}
    return {'type': 'PlainText', 'text': text}


class Card:
    """ Card displayed in the companion app """

    def __init__(self, title: str, content: str = '', type_: str = CARD_TYPE_SIMPLE):
        if not title:
            raise ValueError('Card title is required')
        self.type_ = type_
        self.title = title
        self.content = content

    def dict(self) -> Dict[str, str]:
        return {'type': self.type_, 'title': self.title, 'content': self.content}

    def __repr__(self) -> str:
        return f'Card({self.title!r}, {self.content!r})'


class Response:
    """ Answer to the voice platform

    :ivar text:     spoken text, plain or SSML wrapped in <speak/> tag, may be empty
    :ivar type_:    :py:const:`RESPONSE_TYPE_ASK` or :py:const:`RESPONSE_TYPE_TELL`
    :ivar reprompt: spoken if the user does not answer an ASK response
    :ivar card:     optional :py:class:`Card`
    """

    def __init__(self, text: str = '', type_: str = RESPONSE_TYPE_TELL,
                 reprompt: Optional[str] = None, card: Optional[Card] = None):
        if type_ not in (RESPONSE_TYPE_TELL, RESPONSE_TYPE_ASK):
            raise ValueError(f'Type {type_} is not a valid type.')

        self.text = text
        self.type_ = type_
        self.reprompt = reprompt
        self.card = card

    @property
    def should_end_session(self) -> bool:
        return self.type_ == RESPONSE_TYPE_TELL

    def dict(self, context) -> Dict[str, Any]:
        """ Response envelope, with the session attributes of `context` if there are any

        :param context: the request context or `None`
        :return:
        """
        body: Dict[str, Any] = {}
        if self.text:
            body['outputSpeech'] = output_speech(self.text)
        if self.reprompt:
            body['reprompt'] = {'outputSpeech': output_speech(self.reprompt)}
        if self.card:
            body['card'] = self.card.dict()
        body['shouldEndSession'] = self.should_end_session

        envelope: Dict[str, Any] = {'version': __envelope_version__, 'response': body}
        session = getattr(context, 'session', None)
        if session:
            envelope['sessionAttributes'] = dict(session)
        return envelope

    def as_response(self, context) -> HTTPResponse:
        return HTTPResponse(json.dumps(self.dict(context)), 200, JSON_HEADERS)

    def __repr__(self) -> str:
        return f'Response({self.text!r}, type_={self.type_!r}, reprompt={self.reprompt!r}, card={self.card!r})'


def tell(text: str = '', **kwargs) -> Response:
    """ Say the text and close the session """
    return Response(text, RESPONSE_TYPE_TELL, **kwargs)


def ask(text: str = '', **kwargs) -> Response:
    """ Say the text and wait for an answer """
    return Response(text, RESPONSE_TYPE_ASK, **kwargs)


class ErrorResponse:
    """ Error sent as JSON ``{"code": <code>, "text": <text>}`` with the HTTP status of the code:

        ==== ======================== ===========
        code meaning                  HTTP status
        ==== ======================== ===========
        1    intent/route not found   404
        2    invalid application id   400
        3    bad request              400
        999  internal error           500
        ==== ======================== ===========
    """

    code_map = {1: 404, 2: 400, 3: 400, 999: 500}

    def __init__(self, code: int, text: str):
        self.code = code
        self.text = text

    def json(self) -> str:
        return json.dumps({'code': self.code, 'text': self.text})

    def as_response(self, context=None) -> HTTPResponse:
        return HTTPResponse(self.json(), self.code_map.get(self.code, 500), JSON_HEADERS)

    def __repr__(self) -> str:
        return self.json()
