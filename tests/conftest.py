"""
pytest configuration and fixtures.
"""

import pytest


@pytest.fixture
def sample_invite() -> str:
    """Sample INVITE request with an SDP body."""
    body = (
        "v=0\r\n"
        "o=alice 2890844526 2890844526 IN IP4 pc33.atlanta.com\r\n"
        "s=-\r\n"
        "c=IN IP4 pc33.atlanta.com\r\n"
        "t=0 0\r\n"
        "m=audio 49172 RTP/AVP 0\r\n"
    )
    return (
        "INVITE sip:bob@biloxi.com SIP/2.0\r\n"
        "Via: SIP/2.0/UDP pc33.atlanta.com;branch=z9hG4bK776asdhds\r\n"
        "Max-Forwards: 70\r\n"
        "To: Bob <sip:bob@biloxi.com>\r\n"
        "From: Alice <sip:alice@atlanta.com>;tag=1928301774\r\n"
        "Call-ID: a84b4c76e66710@pc33.atlanta.com\r\n"
        "CSeq: 314159 INVITE\r\n"
        "Contact: <sip:alice@pc33.atlanta.com>\r\n"
        "Content-Type: application/sdp\r\n"
        f"Content-Length: {len(body)}\r\n"
        "\r\n"
    ) + body


@pytest.fixture
def sample_response() -> str:
    """Sample 200 OK response without a body."""
    return (
        "SIP/2.0 200 OK\r\n"
        "Via: SIP/2.0/UDP server10.biloxi.com;branch=z9hG4bKnashds8\r\n"
        "To: Bob <sip:bob@biloxi.com>;tag=a6c85cf\r\n"
        "From: Alice <sip:alice@atlanta.com>;tag=1928301774\r\n"
        "Call-ID: a84b4c76e66710\r\n"
        "CSeq: 314159 INVITE\r\n"
        "Content-Length: 0\r\n"
        "\r\n"
    )


@pytest.fixture
def sample_options() -> str:
    """Sample OPTIONS request using LF line endings only."""
    return (
        "OPTIONS sip:carol@chicago.com;transport=tcp SIP/2.0\n"
        "Via: SIP/2.0/TCP pc33.atlanta.com;branch=z9hG4bKhjhs8ass877\n"
        "To: <sip:carol@chicago.com>\n"
        "From: Alice <sip:alice@atlanta.com>;tag=1928301774\n"
        "Call-ID: a84b4c76e66710\n"
        "CSeq: 63104 OPTIONS\n"
        "\n"
    )
