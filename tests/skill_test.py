#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#
import unittest

import requests

from oxford_skill import skill, Context, Response, tell
from oxford_skill.intents import Intent, LocalContext, context
from oxford_skill.responses import ErrorResponse
from oxford_skill.skill import app
from oxford_skill.test_helpers import create_context
from impl.dictionary import SERVICE_ERROR

TEST_INTENT = 'TEST__INTENT'


class TestSkill(unittest.TestCase):

    def tearDown(self):
        app().get_intents().pop(TEST_INTENT, None)

    def test_slots_by_name(self):
        @skill.intent_handler(TEST_INTENT)
        def handler(context: Context, Word: str, Language: str) -> Response:
            return tell(f'{context.intent_name} {Word} {Language}')

        response = skill.test_intent(TEST_INTENT, Word='set')
        self.assertEqual(response.text, f'{TEST_INTENT} set None')

    def test_string_result(self):
        @skill.intent_handler(TEST_INTENT)
        def handler() -> str:
            return 'Plain text'

        response = skill.test_intent(TEST_INTENT)
        self.assertIsInstance(response, Response)
        self.assertEqual(response.text, 'Plain text')

    def test_duplicate(self):
        skill.intent_handler(TEST_INTENT)(lambda: 'one')
        with self.assertRaises(ValueError):
            skill.intent_handler(TEST_INTENT)(lambda: 'two')

    def test_no_type_hint(self):
        with self.assertRaises(ValueError):
            @skill.intent_handler(TEST_INTENT)
            def handler(Word):
                return Word

    def test_request_exception(self):
        @skill.intent_handler(TEST_INTENT)
        def handler() -> Response:
            raise requests.exceptions.ConnectionError()

        response = skill.test_intent(TEST_INTENT)
        self.assertEqual(response.text, 'Sorry, the Oxford service is experiencing a problem. Please try again later.')
        self.assertEqual(response.text, SERVICE_ERROR)

    def test_exception(self):
        @skill.intent_handler(TEST_INTENT)
        def handler() -> Response:
            raise KeyError('boom')

        response = skill.test_intent(TEST_INTENT)
        self.assertIsInstance(response, ErrorResponse)
        self.assertEqual(response.code, 999)

    def test_unknown_return_value(self):
        intent = Intent(TEST_INTENT, lambda context: 42)
        with self.assertRaises(ValueError):
            intent(create_context(TEST_INTENT))

    def test_intent_requires_name_and_implementation(self):
        with self.assertRaises(ValueError):
            Intent('', lambda context: 'text')
        with self.assertRaises(ValueError):
            Intent(TEST_INTENT, None)

    def test_fallback(self):
        import impl.conversation
        self.assertEqual(app().get_intent('NOT__REGISTERED').implementation.__name__,
                         impl.conversation.unsupported.__name__)


class TestContext(unittest.TestCase):

    def test_intent_context(self):
        ctx = create_context('OneshotOxfordIntent', Word='set', session={'sessionId': 'abc', 'new': False})
        self.assertEqual(ctx.request_type, 'IntentRequest')
        self.assertEqual(ctx.intent_name, 'OneshotOxfordIntent')
        self.assertEqual(ctx.slots, {'Word': 'set'})
        self.assertEqual(ctx.session_id, 'abc')
        self.assertFalse(ctx.session.new_session)
        self.assertEqual(ctx.application_id, 'amzn1.ask.skill.test')

    def test_launch_context(self):
        ctx = create_context('LaunchRequest')
        self.assertEqual(ctx.request_type, 'LaunchRequest')
        self.assertIsNone(ctx.intent_name)
        self.assertEqual(ctx.slots, {})

    def test_slot_without_value(self):
        ctx = create_context('DialogOxfordIntent')
        ctx.slots['Word'] = None
        self.assertIsNone(ctx.get_slot('Word'))
        self.assertEqual(ctx.get_slot('Word', 'default'), 'default')

    def test_current_context(self):
        LocalContext.set_current(None)
        with self.assertRaises(AttributeError):
            _ = context.request_id

        ctx = create_context('AMAZON.YesIntent')
        self.assertIs(LocalContext.get_current(), ctx)
        self.assertEqual(context.request_id, ctx.request_id)
        LocalContext.set_current(None)

    def test_new_session(self):
        self.assertTrue(create_context('AMAZON.YesIntent').session.new_session)
        self.assertFalse(create_context('AMAZON.YesIntent', session={'new': False}).session.new_session)
