# /c4killer/setup.py
from setuptools import setup, find_packages

setup(
    name='c4killer',
    version='0.1',
    packages=find_packages(include=['c4killer', 'c4killer.*']),
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest'],
    },
)
