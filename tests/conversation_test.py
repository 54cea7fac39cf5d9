#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#
import unittest

from oxford_skill.responses import RESPONSE_TYPE_ASK, RESPONSE_TYPE_TELL
from oxford_skill.test_helpers import create_context
from impl.conversation import skill, GOODBYE, UNSUPPORTED, WELCOME, WELCOME_REPROMPT


class TestConversation(unittest.TestCase):

    def test_welcome(self):
        """ Opening the skill greets the user with SSML and waits for the word
        """
        response = skill.test_intent('LaunchRequest')
        self.assertEqual(response.type_, RESPONSE_TYPE_ASK)
        self.assertEqual(response.text, WELCOME)
        self.assertEqual(response.reprompt, WELCOME_REPROMPT)

        data = response.dict(create_context('LaunchRequest'))['response']
        self.assertEqual(data['outputSpeech'], {
            'type': 'SSML',
            'ssml': '<speak>Welcome to Oxford Word Look up. What word would you like information for?</speak>'
        })
        self.assertEqual(data['reprompt']['outputSpeech']['type'], 'PlainText')
        self.assertFalse(data['shouldEndSession'])

    def test_exit(self):
        """ Stop, cancel and no all say goodbye
        """
        responses = [skill.test_intent(name) for name in ('AMAZON.StopIntent', 'AMAZON.CancelIntent', 'AMAZON.NoIntent')]
        for response in responses:
            self.assertEqual(response.type_, RESPONSE_TYPE_TELL)
            self.assertEqual(response.text, GOODBYE)
            self.assertIsNone(response.card)

        ctx = create_context('AMAZON.NoIntent')
        self.assertEqual(len({str(response.dict(ctx)) for response in responses}), 1)

    def test_unsupported(self):
        for name in ('AMAZON.HelpIntent', 'SupportedLanguagesIntent', 'oneshotoxfordintent'):
            with self.subTest(intent=name):
                response = skill.test_intent(name)
                self.assertEqual(response.type_, RESPONSE_TYPE_ASK)
                self.assertEqual(response.text, UNSUPPORTED)
                self.assertEqual(response.reprompt, UNSUPPORTED)

    def test_session_ended(self):
        response = skill.test_intent('SessionEndedRequest')
        data = response.dict(create_context('SessionEndedRequest'))
        self.assertEqual(data['response'], {'shouldEndSession': True})
