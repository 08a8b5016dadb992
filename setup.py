#!/usr/bin/env python
from setuptools import setup, find_packages


setup(name='django-oscar-vanco',
      version='0.1.0',
      description="Vanco Payment Solutions module for django-oscar",
      long_description=open('README.rst').read(),
      keywords="Payment, Vanco",
      license='BSD',
      packages=find_packages(exclude=['sandbox*', 'tests*']),
      include_package_data=True,
      python_requires='>=3.8',
      install_requires=[
          'django-oscar>=3.2',
      ],
      extras_require={
          'test': [
              'pytest',
          ],
      },
      # See http://pypi.python.org/pypi?%3Aaction=list_classifiers
      classifiers=[
          'Environment :: Web Environment',
          'Framework :: Django',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Operating System :: Unix',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
      ]
    )
