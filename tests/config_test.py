#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#
import unittest
from unittest import mock

from oxford_skill.config import Config


class TestConfig(unittest.TestCase):

    def setUp(self):
        with mock.patch.object(Config, 'read_conf'):
            self.config = Config()

    def test_defaults(self):
        self.assertEqual(self.config.get('skill', 'name'), 'oxford')
        self.assertEqual(self.config.getint('http', 'port'), 4242)

    @mock.patch.dict('os.environ', {'OXFORD_APP_ID': 'app-id', 'OXFORD_APP_KEY': 'app-key'})
    def test_credentials_from_environment(self):
        self.assertEqual(self.config.get('oxford', 'app_id'), 'app-id')
        self.assertEqual(self.config.get('oxford', 'app_key'), 'app-key')

    @mock.patch.dict('os.environ', {}, clear=True)
    def test_env_var_default(self):
        self.assertEqual(self.config.get('oxford', 'url'), 'https://od-api.oxforddictionaries.com/api/v1/entries/en/')
        self.assertEqual(self.config.get('oxford', 'app_key'), '')

    @mock.patch.dict('os.environ', {'OXFORD_API_URL': 'http://localhost/entries/'})
    def test_read_environment(self):
        self.config.read_dict({'oxford': {'url': 'http://config/entries/'}})
        self.config.read_environment('OXFORD_API_URL', 'oxford', 'url')
        self.assertEqual(self.config.get('oxford', 'url'), 'http://localhost/entries/')

    def test_application_ids(self):
        self.config.read_dict({'skill': {'application_ids': 'amzn1.ask.skill.one, amzn1.ask.skill.two\n'}})
        self.assertEqual(self.config.application_ids(), ['amzn1.ask.skill.one', 'amzn1.ask.skill.two'])

    @mock.patch.dict('os.environ', {}, clear=True)
    def test_no_application_ids(self):
        self.assertEqual(self.config.application_ids(), [])

    @mock.patch.dict('os.environ', {'SKILL_APPLICATION_ID': 'amzn1.ask.skill.env'})
    def test_application_id_from_environment(self):
        self.assertEqual(self.config.application_ids(), ['amzn1.ask.skill.env'])

    @mock.patch.dict('os.environ', {'OXFORD_HOST': 'localhost'}, clear=True)
    def test_env_vars_inside_value(self):
        self.config.read_dict({'oxford': {'url': 'http://${OXFORD_HOST:dictionary}:${OXFORD_PORT:8080}/entries/'}})
        self.assertEqual(self.config.get('oxford', 'url'), 'http://localhost:8080/entries/')

    def test_get_list_fallback(self):
        self.assertEqual(self.config.get_list('tests', 'include', fallback='impl/*,\n oxford_skill/* ,'),
                         ['impl/*', 'oxford_skill/*'])
        self.assertEqual(self.config.get_list('tests', 'include'), [])
