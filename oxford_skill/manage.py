#
# voice-skill-sdk
#
# (C) 2020, Deutsche Telekom AG
#
# This file is distributed under the terms of the MIT license.
# For details see the file LICENSE in the top directory.
#

#
# Run/test/display version
#

import sys
import logging
import pathlib
import argparse
import unittest
import importlib

from .config import config

ARG_RUN: str = 'run'
ARG_TEST: str = 'test'
ARG_VERSION: str = 'version'

ENVIRONMENT = (
    ('LOG_FORMAT', 'Log format: "gelf" (JSON lines, default) or "human"'),
    ('LOG_LEVEL', 'Log level: "DEBUG" (default), "INFO", "WARNING", "ERROR", "CRITICAL"'),
    ('SKILL_CONF', 'Configuration file, default: "skill.conf"'),
    ('SKILL_APPLICATION_ID', 'Application ids the skill accepts requests from, comma separated'),
    ('OXFORD_API_URL', 'Oxford Dictionaries API entries endpoint'),
    ('OXFORD_APP_ID', 'Oxford Dictionaries API application id'),
    ('OXFORD_APP_KEY', 'Oxford Dictionaries API application key'),
)

logger = logging.getLogger(__name__)


def load_skill(module: str) -> None:
    """ Import the skill implementation: a package with all its modules, a module or a python file

    :param module:
    :return:
    """
    path = pathlib.Path(module)
    if path.suffix == '.py':
        module = str(path.with_suffix('')).replace('/', '.')

    try:
        importlib.import_module(module)
        if path.is_dir():
            for file in sorted(path.glob('*.py')):
                if file.name != '__init__.py':
                    importlib.import_module(f'{module}.{file.stem}')
    except ModuleNotFoundError as ex:
        logger.error('Cannot load %s: %s', path.absolute(), repr(ex))


def unit_tests_pass() -> bool:
    """ Discover and run `tests/*_test.py` unit tests """
    suite = unittest.defaultTestLoader.discover(config.get('tests', 'dir', fallback='tests'),
                                                pattern=config.get('tests', 'patterns', fallback='*_test.py'),
                                                top_level_dir='.')
    return unittest.TextTestRunner().run(suite).wasSuccessful()


def run_tests(cover: int = 0):
    """ Run unit tests, optionally measuring the coverage

    :param cover:   `True` to report coverage, a number to also require this coverage percentage
    :return:        exit status: 0 or failure message
    """
    if not cover:
        return 0 if unit_tests_pass() else 'FAIL: unit tests'

    from coverage import Coverage

    cov = Coverage(include=config.get_list('tests', 'include', fallback='impl/*, oxford_skill/*'),
                   omit=config.get_list('tests', 'exclude', fallback='tests/*, .venv/*, venv/*'))
    cov.start()
    passed = unit_tests_pass()
    cov.stop()

    if not passed:
        return 'FAIL: unit tests'

    result = cov.report()
    if cover is not True and round(result) < cover:
        return f'\nFAIL: expected {cover}% coverage'
    return 0


def run_server(dev: bool) -> None:
    # Keep gunicorn from parsing our arguments
    sys.argv = sys.argv[:1]

    from . import skill
    skill.run(dev=dev)


def parser() -> argparse.ArgumentParser:
    epilog = 'Environment variables:\n\n' + '\n'.join(f'{name:<22}{text}' for name, text in ENVIRONMENT)

    _parser = argparse.ArgumentParser(prog='manage.py', description='Oxford Word Look Up skill tasks',
                                      formatter_class=argparse.RawDescriptionHelpFormatter, epilog=epilog)
    # "--dev" goes before the sub-command: "manage.py --dev run"
    _parser.add_argument('-t', '--dev', action='store_true', help='start in "development" mode')
    commands = _parser.add_subparsers(dest='subcmd')

    run = commands.add_parser(ARG_RUN, help='Run the HTTP server')
    run.add_argument('module', help='Skill module, default "impl"', nargs='?', default='impl')

    test = commands.add_parser(ARG_TEST, help='Run unit tests')
    test.add_argument('module', help='Skill module, default "impl"', nargs='?', default='impl')
    test.add_argument('-c', '--coverage', help='display coverage report, fail if below the given percentage',
                      const=True, type=int, default=0, nargs='?')

    commands.add_parser(ARG_VERSION, help='Print the skill version')
    return _parser


def manage():
    """ Entry point """

    _parser = parser()
    args = _parser.parse_args()

    if args.subcmd is None:
        _parser.print_usage()
        sys.exit()

    if args.subcmd == ARG_VERSION:
        print(config.get('skill', ARG_VERSION))
        return

    load_skill(args.module)

    if args.subcmd == ARG_RUN:
        run_server(args.dev)
    else:
        sys.exit(run_tests(args.coverage))
