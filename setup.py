#!/usr/bin/env python

from setuptools import setup, find_packages

import pybimap

setup(name='pybimap',
      version=pybimap.__version__,
      author='pybimap developers',
      license='BSD',
      description='Bidirectional one-to-one map',
      long_description=open('README.rst').read(),
      classifiers=[
          'Development Status :: 5 - Production/Stable',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3.13',
          'Topic :: Software Development :: Libraries :: Python Modules',
      ],
      packages=find_packages(exclude=['*.tests']),
      keywords=['bidict', 'bimap', 'mapping'],
      zip_safe=True,
      include_package_data=True,
      extras_require={'test': ['pytest']},
      )
