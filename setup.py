#!/usr/bin/env python
from setuptools import setup

setup(
    name='smoothers',
    version='0.1.0',
    description='Signal Smoothing Library',
    license='MIT',
    packages=['smoothers'],
    python_requires='>=3.6',
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    platforms=['POSIX'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
