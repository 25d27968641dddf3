import hashlib
import hmac
from typing import Callable, Dict

import http_sfv
from http_message_signatures import InvalidSignature

from httpreq.error import InvalidArgumentError

# Algorithms of the Content-Digest header, by order of preference. See
# https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-digest-headers-13#establish-hash-algorithm-registry
DIGEST_ALGORITHMS: Dict[str, Callable] = {
    "sha-512": hashlib.sha512,
    "sha-256": hashlib.sha256,
}


def generate_content_digest(body: str | bytes, algorithm: str = "sha-512") -> str:
    """Returns a Content-Digest header value for a request body, according to
    https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-digest-headers-13
    """
    try:
        hash_function = DIGEST_ALGORITHMS[algorithm]
    except KeyError:
        raise InvalidArgumentError(
            f"unsupported content digest algorithm '{algorithm}'"
        ) from None

    if isinstance(body, str):
        body = body.encode()

    return str(http_sfv.Dictionary({algorithm: hash_function(body).digest()}))


def verify_content_digest(digest_header: str | bytes, body: str | bytes):
    """Verify that a Content-Digest header matches a request body.

    The strongest supported algorithm present in the header is checked.
    """
    if isinstance(body, str):
        body = body.encode()
    if isinstance(digest_header, str):
        digest_header = digest_header.encode()

    parsed_header = http_sfv.Dictionary()
    parsed_header.parse(digest_header)

    for algorithm, hash_function in DIGEST_ALGORITHMS.items():
        if algorithm in parsed_header:
            digest = parsed_header[algorithm].value
            expect_digest = hash_function(body).digest()
            break
    else:
        raise ValueError("missing content digest in http request header")

    if not hmac.compare_digest(digest, expect_digest):
        raise InvalidSignature(
            "digest of the request body does not match the Content-Digest header"
        )
