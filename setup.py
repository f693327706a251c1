#!/usr/bin/env python
""" Setup to allow pip installs of taxonomy-facets module """

from setuptools import setup

setup(
    name='taxonomy-facets',
    version='1.0.0',
    description='Faceted navigation term sets built from taxonomy terms and search aggregations',
    license='AGPL',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Framework :: Django',
    ],
    packages=['facets', 'facets.tests'],
    python_requires='>=3.8',
    install_requires=[
        "django>=3.2",
        "django-waffle",
        "event-tracking",
    ],
    extras_require={
        "test": [
            "ddt",
            "pytest",
            "pytest-django",
        ],
    },
)
