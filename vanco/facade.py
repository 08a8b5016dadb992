import logging
from decimal import Decimal as D, ROUND_HALF_UP

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from oscar.apps.payment.exceptions import UnableToTakePayment

from vanco import gateway

logger = logging.getLogger('vanco.facade')

REQUIRED_SETTINGS = ('VANCO_USER_ID', 'VANCO_PASSWORD', 'VANCO_CLIENT_ID')


class Facade(object):
    """
    A bridge between oscar's objects and the core gateway object
    """

    def __init__(self):
        for name in REQUIRED_SETTINGS:
            if not getattr(settings, name, None):
                raise ImproperlyConfigured("%s must be set" % name)
        self.gateway = gateway.Gateway(
            settings.VANCO_USER_ID,
            settings.VANCO_PASSWORD,
            settings.VANCO_CLIENT_ID,
            getattr(settings, 'VANCO_TEST_MODE', True))

    def minor_units(self, amount):
        return int((D(amount) * 100).quantize(D('1'), rounding=ROUND_HALF_UP))

    def extract_card_data(self, bankcard):
        name = getattr(bankcard, 'name', None) or u'%s %s' % (
            bankcard.first_name, bankcard.last_name)
        return {
            'card_number': bankcard.number,
            'first_name': bankcard.first_name,
            'last_name': bankcard.last_name,
            'expiry_month': bankcard.month,
            'expiry_year': bankcard.year,
            'cvv2': getattr(bankcard, 'verification_value', None),
            'billing_name': name,
        }

    def extract_address_data(self, address):
        data = {}
        if not address:
            return data
        data['address1'] = getattr(address, 'line1', '')
        data['address2'] = getattr(address, 'line2', '')
        data['city'] = getattr(address, 'line4', '')
        data['state'] = getattr(address, 'state', '')
        data['zip'] = getattr(address, 'postcode', '')
        country = getattr(address, 'country', None)
        data['country'] = getattr(country, 'iso_3166_1_a2', country) or ''
        return data

    def run(self, operation_fn):
        """
        Log in, then run the operation with the new session ID.

        The operation is attempted even when login fails so that the
        processor's own error for it is reported.
        """
        responses = gateway.MultiResponse()
        login_response = responses.process(self.gateway.login)
        if not login_response.succeeded:
            logger.warning("Vanco login failed (code: %s, message: %s)",
                           login_response.error_code, login_response.message)
        responses.process(lambda: operation_fn(login_response.session_id))
        return responses

    # ===
    # API
    # ===

    def purchase(self, amount, bankcard, billing_address=None, fund_id=None):
        """
        Debit a bankcard for the given amount
        """
        if amount == 0:
            raise UnableToTakePayment("Order amount must be non-zero")
        kwargs = self.extract_card_data(bankcard)
        kwargs.update(self.extract_address_data(billing_address))
        kwargs['amount'] = self.minor_units(amount)
        kwargs['fund_id'] = fund_id
        return self.run(
            lambda session_id: self.gateway.purchase(session_id, **kwargs))

    def refund(self, amount, authorization, fund_id=None):
        """
        Return funds against the authorization of a previous purchase
        """
        money = self.minor_units(amount)
        return self.run(
            lambda session_id: self.gateway.refund(
                session_id, amount=money, authorization=authorization,
                fund_id=fund_id))

    def scrub(self, transcript):
        return gateway.scrub(transcript)
