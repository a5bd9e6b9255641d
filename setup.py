"""
Setup.py script for limbint
"""
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='limbint',
    version='0.1.0',
    description='Arbitrary-precision integers on 32-bit limbs',
    long_description=long_description,

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Mathematics',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='bigint arbitrary-precision integer',

    packages=find_packages(),
    python_requires='>=3.8',

    install_requires=['py>=1.11'],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            "limbint = limbint.main:main",
        ],
    },
)
