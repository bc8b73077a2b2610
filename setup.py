# -*- coding: utf-8 -*-
import codecs
from setuptools import setup, find_packages


tests_require = [
    'Flask>=2.2',
    'pytest>=7.0',
]

setup(
    name='RestChain',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    license='MIT',
    description='REST API client that builds request URIs from chained attribute access',
    long_description=codecs.open('README.rst', encoding='utf-8').read(),
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.20',
        'blinker>=1.6',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'flask': [
            'Flask>=2.2',
        ],
        'tests': tests_require,
    }
)
