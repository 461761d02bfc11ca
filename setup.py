#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='bookshelf',
    version='0.1.0',
    description='GraphQL API over an in-memory set of authors and books',
    long_description=read("README.rst"),
    packages=['bookshelf', 'bookshelf.database', 'bookshelf.graph'],
    package_data={'bookshelf': ['graphiql/index.html']},
    keywords="graphql graphlayer books authors",
    install_requires=[
        "graphlayer[graphql]==0.2.8",
        "Flask",
        "Werkzeug",
    ],
    extras_require={
        "test": ["pytest", "precisely"],
    },
    entry_points={
        "console_scripts": [
            "bookshelf-server=bookshelf.server:main",
        ],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
