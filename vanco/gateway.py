import datetime
import http.client
import logging
import re
import secrets
from decimal import Decimal as D
from urllib.parse import urlsplit

from oscar.apps.payment.exceptions import GatewayError

from vanco import xmlutils

logger = logging.getLogger('vanco.gateway')

TEST_URL = 'https://www.vancodev.com/cgi-bin/wstest2.vps'
LIVE_URL = 'https://www.vancoservices.com/cgi-bin/ws2.vps'

ROOT_TAG = 'VancoWS'
VERSION = 2

# Request types
LOGIN = 'Login'
PURCHASE = 'EFTAddCompleteTransaction'
REFUND = 'EFTAddCredit'

AUTHORIZATION_SEPARATOR = '|'

SCRUBBED_TAGS = ('Password', 'CardCVV2', 'AccountNumber')


def scrub(transcript):
    """
    Mask credentials and card data in a request/response transcript
    """
    for tag in SCRUBBED_TAGS:
        transcript = re.sub(r'(<%s>).+?(</%s>)' % (tag, tag),
                            r'\1[FILTERED]\2', transcript, flags=re.I | re.S)
    return transcript


def format_amount(money):
    """
    Render an amount in minor units (cents) as a decimal string
    """
    return str((D(money) / 100).quantize(D('0.01')))


def two_digits(value):
    return '%02d' % (int(value) % 100)


def amount_elements(money, fund_id=None):
    if not fund_id:
        return [('Amount', format_amount(money))]
    return [('Funds', [
        ('Fund', [
            ('FundID', fund_id),
            ('FundAmount', format_amount(money)),
        ]),
    ])]


# Outcome resolution

def error_from(data):
    errors = data['response_errors']
    error = errors.get('Error') if isinstance(errors, dict) else None
    if isinstance(error, list):
        error = error[0]
    return error if isinstance(error, dict) else {}


def success_from(data):
    return 'response_errors' not in data


def message_from(succeeded, data):
    if succeeded:
        return 'Success'
    return error_from(data).get('ErrorDescription')


def error_code_from(succeeded, data):
    if succeeded:
        return None
    return error_from(data).get('ErrorCode')


def authorization_from(data):
    return AUTHORIZATION_SEPARATOR.join([
        data.get('response_customerref') or '',
        data.get('response_paymentmethodref') or '',
        data.get('response_transactionref') or '',
    ])


def split_authorization(authorization):
    """
    Return the customer, payment method and transaction references of an
    authorization token.  Always returns three strings.
    """
    parts = (authorization or '').split(AUTHORIZATION_SEPARATOR)
    return (parts + ['', '', ''])[:3]


class Response(object):
    """
    Encapsulate a Vanco response
    """

    def __init__(self, request_xml, response_xml):
        self.request_xml = request_xml
        self.response_xml = response_xml
        self.data = xmlutils.parse(response_xml)
        self.succeeded = success_from(self.data)
        self.message = message_from(self.succeeded, self.data)
        self.error_code = error_code_from(self.succeeded, self.data)
        self.authorization = authorization_from(self.data)

    def __getitem__(self, key):
        return self.data[key]

    def __contains__(self, key):
        return key in self.data

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __str__(self):
        return xmlutils.as_text(self.response_xml)

    @property
    def session_id(self):
        return self.data.get('response_sessionid')

    def is_successful(self):
        return self.succeeded


class MultiResponse(object):
    """
    The responses of a sequence of dependent requests.

    Every step is run and kept; the outcome of the sequence is the outcome of
    the last step.
    """

    def __init__(self):
        self.responses = []

    def process(self, request_fn):
        response = request_fn()
        self.responses.append(response)
        return response

    @property
    def primary_response(self):
        return self.responses[-1]

    @property
    def succeeded(self):
        return self.primary_response.succeeded

    @property
    def message(self):
        return self.primary_response.message

    @property
    def error_code(self):
        return self.primary_response.error_code

    @property
    def authorization(self):
        return self.primary_response.authorization

    @property
    def data(self):
        return self.primary_response.data

    def is_successful(self):
        return self.succeeded


class Gateway(object):

    def __init__(self, user_id, password, client_id, test_mode=False):
        self._user_id = user_id
        self._password = password
        self._client_id = client_id
        self._test_mode = test_mode

    @property
    def url(self):
        return TEST_URL if self._test_mode else LIVE_URL

    def _fetch_response_xml(self, request_xml):
        parts = urlsplit(self.url)
        conn = http.client.HTTPSConnection(parts.hostname, parts.port or 443,
                                           timeout=30)
        headers = {"Content-Type": "text/xml"}
        try:
            conn.request("POST", parts.path, request_xml.encode('utf-8'),
                         headers)
            response = conn.getresponse()
            response_xml = response.read()
        finally:
            conn.close()
        if response.status != http.client.OK:
            raise GatewayError(
                "Unable to communicate with payment gateway (code: %s, "
                "response: %s)" % (response.status,
                                   xmlutils.as_text(response_xml)))
        # Raw bytes so the parser honours the declared encoding
        return response_xml

    def _auth_elements(self, request_type, *extra):
        elements = [
            ('RequestType', request_type),
            ('RequestID', secrets.token_hex(15)),
            ('RequestTime', datetime.datetime.now().astimezone()),
            ('Version', VERSION),
        ]
        elements.extend(extra)
        return ('Auth', elements)

    def _request_elements(self, request_vars):
        return ('Request', [('RequestVars', request_vars)])

    def _build_login_request_xml(self):
        return xmlutils.build_document(ROOT_TAG, [
            self._auth_elements(LOGIN),
            self._request_elements([
                ('UserID', self._user_id),
                ('Password', self._password),
            ]),
        ])

    def _build_purchase_request_xml(self, session_id, **kwargs):
        request_vars = [('ClientID', self._client_id)]
        request_vars += amount_elements(kwargs['amount'], kwargs.get('fund_id'))
        request_vars += [
            ('AccountNumber', kwargs['card_number']),
            ('CustomerName', '%s, %s' % (kwargs['last_name'],
                                         kwargs['first_name'])),
            ('CardExpMonth', two_digits(kwargs['expiry_month'])),
            ('CardExpYear', two_digits(kwargs['expiry_year'])),
            ('CardCVV2', kwargs.get('cvv2')),
            ('CardBillingName', kwargs.get('billing_name')),
            ('CardBillingAddr1', kwargs.get('address1')),
            ('CardBillingAddr2', kwargs.get('address2')),
            ('CardBillingCity', kwargs.get('city')),
            ('CardBillingState', kwargs.get('state')),
            ('CardBillingZip', kwargs.get('zip')),
            ('CardBillingCountryCode', kwargs.get('country')),
            ('AccountType', 'CC'),
            ('TransactionTypeCode', 'WEB'),
            ('StartDate', '0000-00-00'),
            ('FrequencyCode', 'O'),
        ]
        return xmlutils.build_document(ROOT_TAG, [
            self._auth_elements(PURCHASE, ('SessionID', session_id)),
            self._request_elements(request_vars),
        ])

    def _build_refund_request_xml(self, session_id, **kwargs):
        customer_ref, payment_method_ref, transaction_ref = \
            split_authorization(kwargs['authorization'])
        request_vars = [('ClientID', self._client_id)]
        request_vars += amount_elements(kwargs['amount'], kwargs.get('fund_id'))
        request_vars += [
            ('CustomerRef', customer_ref),
            ('PaymentMethodRef', payment_method_ref),
            ('TransactionRef', transaction_ref),
            ('ContactName', 'Bilbo Baggins'),
            ('ContactPhone', '1234567890'),
            ('ContactExtension', 'None'),
            ('ReasonForCredit', 'Refund requested'),
        ]
        return xmlutils.build_document(ROOT_TAG, [
            self._auth_elements(REFUND, ('SessionID', session_id)),
            self._request_elements(request_vars),
        ])

    def _do_request(self, request_xml):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request XML:\n%s",
                         xmlutils.prettify_xml(scrub(request_xml)))
        response_xml = self._fetch_response_xml(request_xml)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Response XML:\n%s",
                         scrub(xmlutils.as_text(response_xml)))
        response = Response(request_xml, response_xml)
        if response.succeeded:
            logger.info("Vanco request succeeded (authorization: %s)",
                        response.authorization)
        else:
            logger.info("Vanco request failed (code: %s, message: %s)",
                        response.error_code, response.message)
        return response

    def _check_kwargs(self, kwargs, required_keys):
        for key in required_keys:
            if key not in kwargs:
                raise ValueError('You must provide a "%s" argument' % key)
        for key in kwargs:
            value = kwargs[key]
            if key == 'amount':
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(
                        "Amount must be an integer number of cents "
                        "(passed value: %r)" % (value,))
                if value < 0:
                    raise ValueError("Amount must not be negative")
            if key == 'expiry_month' and not 1 <= int(value) <= 12:
                raise ValueError(
                    "Expiry month must be between 1 and 12 (passed value: %s)"
                    % value)

    # ===
    # API
    # ===

    def login(self):
        """
        Open a session.  The session ID is available as the response's
        ``session_id``.
        """
        return self._do_request(self._build_login_request_xml())

    def purchase(self, session_id, **kwargs):
        """
        Debit a card as a one-off transaction within an open session.

        The amount is in cents.  A ``fund_id`` directs the money to a
        specific fund.
        """
        self._check_kwargs(kwargs, ['amount', 'card_number', 'first_name',
                                    'last_name', 'expiry_month',
                                    'expiry_year'])
        return self._do_request(
            self._build_purchase_request_xml(session_id, **kwargs))

    def refund(self, session_id, **kwargs):
        """
        Credit money back against the authorization of a previous purchase
        """
        self._check_kwargs(kwargs, ['amount', 'authorization'])
        return self._do_request(
            self._build_refund_request_xml(session_id, **kwargs))
