#!/usr/bin/env python
# -*- coding: utf-8 -*-
import re

from setuptools import setup

# Get the version
version_regex = r'__version__ = ["\']([^"\']*)["\']'
with open('sieve/__init__.py', 'r') as f:
    text = f.read()
    match = re.search(version_regex, text)

    if match:
        version = match.group(1)
    else:
        raise RuntimeError("No version number found!")


packages = [
    'sieve',
    'sieve.common',
    'sieve.http11',
    'sieve.uri',
]

setup(
    name='sieve',
    version=version,
    description='Strict HTTP/1.1 request line, header and URI parsers',
    long_description=open('README.rst').read(),
    packages=packages,
    package_data={'': ['README.rst']},
    package_dir={'sieve': 'sieve'},
    include_package_data=True,
    license='MIT License',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    install_requires=[
        'rfc3986>=1.1.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'sieve = sieve.cli:main',
        ],
    },
)
