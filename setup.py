#!/usr/bin/env python

import os

try:
    from setuptools import setup, find_packages
except ImportError:
    exit("This package requires Python version >= 3.7 and Python's setuptools")

HERE = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(HERE, 'requirements.txt')) as f:
    requirements = f.read().splitlines()

about = {}
with open(os.path.join(HERE, 'oxford_skill', '__version__.py')) as f:
    exec(f.read(), about)


options = dict(
    name=about['__name__'],
    version=about['__version__'],
    description=about['__description__'],
    long_description='Oxford Word Look Up is a voice skill that reads the lexical category, '
                     'definition and usage examples of a word from the Oxford Dictionaries API.',

    author=about['__author__'],
    license=about['__license__'],

    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        "License :: OSI Approved :: MIT License",
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
    ],

    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    install_requires=requirements,
    python_requires=">=3.7",
    extras_require={
        'test': ['requests-mock', 'pytest']
    },
    entry_points={'console_scripts': [
        'oxford-skill = oxford_skill.manage:manage',
    ]},
)

setup(**options)
