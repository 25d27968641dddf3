"""HTTP message signatures for requests built with httpreq.

Signatures follow
https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-message-signatures
and cover the request method, the URL host and path, the Content-Type header,
and the request body through the Content-Digest header.
"""

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Mapping, Sequence, cast

import http_sfv
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from http_message_signatures import (
    HTTPMessageSigner,
    HTTPMessageVerifier,
    InvalidSignature,
    VerifyResult,
)
from http_message_signatures.structures import CaseInsensitiveDict

from httpreq.header import Header
from httpreq.request import Request

from .config import (
    COVERED_COMPONENT_IDS,
    DEFAULT_KEY_ID,
    LABEL,
    SIGNATURE_ALGORITHM,
    SIGNATURE_HEADERS,
)
from .digest import generate_content_digest, verify_content_digest
from .key import (
    KeyResolver,
    parse_signing_key,
    parse_verification_key,
    private_key_from_bytes,
    private_key_from_pem,
    public_key_from_bytes,
    public_key_from_pem,
)
from .message import Message

__all__ = [
    "CaseInsensitiveDict",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
    "InvalidSignature",
    "Message",
    "generate_content_digest",
    "parse_signing_key",
    "parse_verification_key",
    "private_key_from_bytes",
    "private_key_from_pem",
    "public_key_from_bytes",
    "public_key_from_pem",
    "sign_request",
    "verify_content_digest",
    "verify_request",
]

logger = logging.getLogger(__name__)


def sign_request(
    request: Request, key: Ed25519PrivateKey, created: datetime
) -> Request:
    """Sign a request using HTTP Message Signatures.

    The signed request is returned as a new Request carrying three additional
    headers: Content-Digest, Signature-Input, and Signature. Earlier values of
    these headers are replaced, whatever their case. The request passed as
    argument is left unchanged.

    The request must have a Content-Type header. At this time, an ED25519
    signature is generated with a hard-coded key ID of "default".

    Args:
        request: The request to sign.
        key: The Ed25519 private key to use to generate the signature.
        created: The time at which the signature is created.

    Raises:
        HTTPMessageSignaturesException: if the request has no Content-Type
            header.
    """
    logger.debug(
        "signing %s request with %d byte body", request.method, len(request.body)
    )
    message = Message.from_request(request)
    message.headers["Content-Digest"] = generate_content_digest(request.body)

    signer = HTTPMessageSigner(
        signature_algorithm=SIGNATURE_ALGORITHM,
        key_resolver=KeyResolver(key_id=DEFAULT_KEY_ID, private_key=key),
    )
    signer.sign(
        message,
        key_id=DEFAULT_KEY_ID,
        covered_component_ids=cast(Sequence[str], COVERED_COMPONENT_IDS),
        created=created,
        label=LABEL,
        include_alg=True,
    )

    signed = _with_headers(
        request, {name: message.headers[name] for name in SIGNATURE_HEADERS}
    )
    logger.debug("signed request successfully")
    return signed


def verify_request(request: Request, key: Ed25519PublicKey, max_age: timedelta):
    """Verify a request containing an HTTP Message Signature.

    The function checks three headers: Content-Digest, Signature-Input, and
    Signature. At least one signature must cover the request method, the URL
    host and path, the Content-Type header, and the Content-Digest header. At
    this time, signatures must use a hard-coded key ID of "default".

    Args:
        request: The request to verify.
        key: The Ed25519 public key to use to verify the signature.
        max_age: The maximum age of the signature.

    Raises:
        InvalidSignature: if a signature is invalid or too old, or if the
            body does not match its digest.
        ValueError: if no signature covers the required components.
    """
    logger.debug("verifying request signature")
    message = Message.from_request(request)

    key_resolver = KeyResolver(key_id=DEFAULT_KEY_ID, public_key=key)
    verifier = HTTPMessageVerifier(
        signature_algorithm=SIGNATURE_ALGORITHM, key_resolver=key_resolver
    )
    results = verifier.verify(message, max_age=max_age)

    for result in results:
        covered_components = extract_covered_components(result)
        if covered_components.issuperset(COVERED_COMPONENT_IDS):
            break
    else:
        raise ValueError(
            f"no signatures found that covered all required components ({COVERED_COMPONENT_IDS})"
        )

    verify_content_digest(message.headers["Content-Digest"], request.body)
    logger.debug("verified request signature successfully")


def extract_covered_components(result: VerifyResult) -> set[str]:
    covered_components: set[str] = set()
    for key in result.covered_components.keys():
        item = http_sfv.Item()
        item.parse(key.encode())
        assert isinstance(item.value, str)
        covered_components.add(item.value)

    return covered_components


def _with_headers(request: Request, values: Mapping[str, str]) -> Request:
    lowered = {name.lower() for name in values}
    header_map = request.header.get_map()
    for name in list(header_map):
        if name.lower() in lowered:
            del header_map[name]
    header_map.extend(values)

    components = replace(request.components, header=Header.from_map(header_map))
    return Request(components, request.body)
