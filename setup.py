#!/usr/bin/env python

from setuptools import setup

__author__ = 'Yusuke Miyazaki <miyazaki.dev@gmail.com>'
__version__ = '0.1'

requires = [
    'numpy>=1.17'
]

extras = {
    'test': ['pytest>=7.0'],
}


setup(
    name='raytracer',
    version=__version__,
    author=__author__,
    author_email='miyazaki.dev@gmail.com',
    description='Canvas with floating point colors and a PPM (P3) encoder',
    packages=['raytracer'],
    install_requires=requires,
    extras_require=extras,
    python_requires='>=3.9',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ]
)
