#!/usr/bin/env python
import sys
from optparse import OptionParser
import logging

import django
from django.conf import settings

logging.disable(logging.CRITICAL)


def configure():
    if settings.configured:
        return
    vanco_settings = {
        'VANCO_USER_ID': 'dummyuser',
        'VANCO_PASSWORD': 'dummypassword',
        'VANCO_CLIENT_ID': 'CL1234',
        'VANCO_TEST_MODE': True,
    }
    try:
        import integration
    except ImportError:
        pass
    else:
        for key, value in vars(integration).items():
            if key.startswith('VANCO'):
                vanco_settings[key] = value

    settings.configure(
        DATABASES={},
        INSTALLED_APPS=[
            'vanco',
        ],
        DEBUG=False,
        **vanco_settings
    )
    django.setup()


def run_tests(*test_args):
    configure()
    from django.test.runner import DiscoverRunner

    if not test_args:
        test_args = ['tests']

    # Run tests
    test_runner = DiscoverRunner(verbosity=1)

    num_failures = test_runner.run_tests(test_args)

    if num_failures > 0:
        sys.exit(num_failures)


if __name__ == '__main__':
    parser = OptionParser()
    (options, args) = parser.parse_args()
    run_tests(*args)
