#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#
import unittest

from oxford_skill import Context
from oxford_skill.decorators import handler_arguments, handler_signature, intent_handler
from oxford_skill.test_helpers import create_context


class SubContext(Context):
    pass


class TestDecorators(unittest.TestCase):

    def test_arguments_from_context(self):
        def handler(context: Context, Word: str, Language: str):
            pass

        ctx = create_context('OneshotOxfordIntent', Word='set')
        self.assertEqual(handler_arguments(ctx, handler_signature(handler)),
                         {'context': ctx, 'Word': 'set', 'Language': None})

    def test_context_subclass(self):
        def handler(ctx: SubContext):
            pass

        ctx = create_context('AMAZON.YesIntent')
        self.assertEqual(handler_arguments(ctx, handler_signature(handler)), {'ctx': ctx})

    def test_missing_type_hint(self):
        def handler(context: Context, Word, Language):
            pass

        with self.assertRaises(ValueError) as cm:
            handler_signature(handler)
        self.assertIn('Word, Language', str(cm.exception))

    def test_invoke_with_context(self):
        @intent_handler
        def handler(Word: str) -> str:
            return f'Word is {Word}'

        self.assertEqual(handler(create_context('OneshotOxfordIntent', Word='set')), 'Word is set')

    def test_direct_call(self):
        @intent_handler
        def handler(Word: str) -> str:
            return f'Word is {Word}'

        self.assertEqual(handler('run'), 'Word is run')
        self.assertEqual(handler(Word='run'), 'Word is run')

    def test_decorated_twice(self):
        def handler(Word: str) -> str:
            return f'Word is {Word}'

        decorated = intent_handler(intent_handler(handler))
        self.assertIs(decorated.__wrapped__, handler)
        self.assertEqual(decorated(create_context('OneshotOxfordIntent', Word='set')), 'Word is set')
