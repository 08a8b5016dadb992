SAMPLE_LOGIN_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>e4d9bfbb6f1ffcb1b7a6f2c6f9d0a1</RequestID>
        <RequestTime>2015-10-14 10:12:44 -0500</RequestTime>
        <RequestType>Login</RequestType>
        <Signature></Signature>
        <Version>2</Version>
    </Auth>
    <Response>
        <SessionID>5d8b104c9d8265db46bdf35ae9685472f4789dc8</SessionID>
    </Response>
</VancoWS>"""

SAMPLE_FAILED_LOGIN_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>e4d9bfbb6f1ffcb1b7a6f2c6f9d0a1</RequestID>
        <RequestTime>2015-10-14 10:12:44 -0500</RequestTime>
        <RequestType>Login</RequestType>
        <Signature></Signature>
        <Version>2</Version>
    </Auth>
    <Response>
        <Errors>
            <Error>
                <ErrorCode>380</ErrorCode>
                <ErrorDescription>Invalid Login Key</ErrorDescription>
            </Error>
        </Errors>
    </Response>
</VancoWS>"""

SAMPLE_PURCHASE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>ad4cbab9740e909423a02e622689d6</RequestID>
        <RequestTime>2015-10-14 10:12:45 -0500</RequestTime>
        <RequestType>EFTAddCompleteTransaction</RequestType>
        <Signature></Signature>
        <SessionID>5d8b104c9d8265db46bdf35ae9685472f4789dc8</SessionID>
        <Version>2</Version>
    </Auth>
    <Response>
        <StartDate>2015-10-14</StartDate>
        <CustomerRef>14949117</CustomerRef>
        <PaymentMethodRef>15751426</PaymentMethodRef>
        <TransactionRef>14946779</TransactionRef>
        <TransactionFee>3.20</TransactionFee>
    </Response>
</VancoWS>"""

SAMPLE_FAILED_PURCHASE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>ad4cbab9740e909423a02e622689d6</RequestID>
        <RequestTime>2015-10-14 10:12:45 -0500</RequestTime>
        <RequestType>EFTAddCompleteTransaction</RequestType>
        <Signature></Signature>
        <SessionID>5d8b104c9d8265db46bdf35ae9685472f4789dc8</SessionID>
        <Version>2</Version>
    </Auth>
    <Response>
        <Errors>
            <Error>
                <ErrorCode>286</ErrorCode>
                <ErrorDescription>Client not set up for International Credit Card Processing</ErrorDescription>
            </Error>
        </Errors>
    </Response>
</VancoWS>"""

SAMPLE_REFUND_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>1f2a8d4ba29a0df3f0bb95c3bd0b7e</RequestID>
        <RequestTime>2015-10-14 10:30:02 -0500</RequestTime>
        <RequestType>EFTAddCredit</RequestType>
        <Signature></Signature>
        <SessionID>5d8b104c9d8265db46bdf35ae9685472f4789dc8</SessionID>
        <Version>2</Version>
    </Auth>
    <Response>
        <CreditRequestReceived>Yes</CreditRequestReceived>
    </Response>
</VancoWS>"""

SAMPLE_FAILED_REFUND_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Auth>
        <RequestID>1f2a8d4ba29a0df3f0bb95c3bd0b7e</RequestID>
        <RequestTime>2015-10-14 10:30:02 -0500</RequestTime>
        <RequestType>EFTAddCredit</RequestType>
        <Signature></Signature>
        <SessionID>5d8b104c9d8265db46bdf35ae9685472f4789dc8</SessionID>
        <Version>2</Version>
    </Auth>
    <Response>
        <Errors>
            <Error>
                <ErrorCode>575</ErrorCode>
                <ErrorDescription>Amount Cannot Be Greater Than $100.05</ErrorDescription>
            </Error>
        </Errors>
    </Response>
</VancoWS>"""

SAMPLE_RESPONSE_VARS_RESPONSE = (
    '<VancoWS><Response><ResponseVars>'
    '<CustomerRef>1</CustomerRef>'
    '<PaymentMethodRef>2</PaymentMethodRef>'
    '<TransactionRef>3</TransactionRef>'
    '</ResponseVars></Response></VancoWS>')

SAMPLE_TRANSCRIPT = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Request>
        <RequestVars>
            <UserID>ES2WSUSER</UserID>
            <Password>vanco2ws</Password>
            <AccountNumber>4111111111111111</AccountNumber>
            <CardCVV2>123</CardCVV2>
        </RequestVars>
    </Request>
</VancoWS>"""

SCRUBBED_TRANSCRIPT = """<?xml version="1.0" encoding="UTF-8"?>
<VancoWS>
    <Request>
        <RequestVars>
            <UserID>ES2WSUSER</UserID>
            <Password>[FILTERED]</Password>
            <AccountNumber>[FILTERED]</AccountNumber>
            <CardCVV2>[FILTERED]</CardCVV2>
        </RequestVars>
    </Request>
</VancoWS>"""

SAMPLE_LATIN1_RESPONSE = (
    b'<?xml version="1.0" encoding="ISO-8859-1"?>'
    b'<VancoWS><Response>'
    b'<Name>Caf\xe9</Name>'
    b'<CustomerRef>1</CustomerRef>'
    b'</Response></VancoWS>')
