import base64
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar, Union

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    load_pem_private_key,
    load_pem_public_key,
)
from http_message_signatures import HTTPSignatureKeyResolver

from httpreq.config import (
    SIGNING_KEY_ENVVAR,
    VERIFICATION_KEY_ENVVAR,
    NamedValueFromEnvironment,
)
from httpreq.error import InvalidArgumentError

K = TypeVar("K", Ed25519PrivateKey, Ed25519PublicKey)


def public_key_from_pem(pem: str | bytes) -> Ed25519PublicKey:
    """Returns an Ed25519 public key given a PEM representation."""
    if isinstance(pem, str):
        pem = pem.encode()

    key = load_pem_public_key(pem)
    if not isinstance(key, Ed25519PublicKey):
        raise ValueError(f"unexpected public key type: {type(key)}")
    return key


def public_key_from_bytes(key: bytes) -> Ed25519PublicKey:
    """Returns an Ed25519 public key from 32 raw bytes."""
    return Ed25519PublicKey.from_public_bytes(key)


def private_key_from_pem(
    pem: str | bytes, password: bytes | None = None
) -> Ed25519PrivateKey:
    """Returns an Ed25519 private key given a PEM representation
    and optional password."""
    if isinstance(pem, str):
        pem = pem.encode()

    key = load_pem_private_key(pem, password=password)
    if not isinstance(key, Ed25519PrivateKey):
        raise ValueError(f"unexpected private key type: {type(key)}")
    return key


def private_key_from_bytes(key: bytes) -> Ed25519PrivateKey:
    """Returns an Ed25519 private key from 32 raw bytes."""
    return Ed25519PrivateKey.from_private_bytes(key)


def _parse_key(
    key: Union[str, bytes, None],
    envvar: str,
    name: str,
    from_pem: Callable[[str], K],
    from_bytes: Callable[[bytes], K],
) -> Optional[K]:
    if isinstance(key, bytes):
        key = key.decode()
    # Only read the environment when no key is given, so that errors name
    # the source of the value.
    setting = NamedValueFromEnvironment(envvar, name, key or None)
    if not setting:
        return None

    # PEM keys passed through environment variables often have their
    # newlines escaped.
    value = setting.value.replace("\\n", "\n")

    try:
        return from_pem(value)
    except (ValueError, TypeError):
        pass
    try:
        return from_bytes(base64.b64decode(value.encode()))
    except ValueError:
        raise InvalidArgumentError(
            f"invalid {setting.name} '{setting.value}'"
        ) from None


def parse_signing_key(
    key: Union[Ed25519PrivateKey, str, bytes, None],
) -> Optional[Ed25519PrivateKey]:
    """Returns the private key to sign requests with.

    The key may be given as an Ed25519PrivateKey, as PEM text or as base64
    encoded raw bytes. When no key is given, it is read from the
    HTTPREQ_SIGNING_KEY environment variable; None is returned if that is not
    set either.

    Raises:
        InvalidArgumentError: if the key cannot be decoded.
    """
    if isinstance(key, Ed25519PrivateKey):
        return key
    return _parse_key(
        key,
        SIGNING_KEY_ENVVAR,
        "signing key",
        private_key_from_pem,
        private_key_from_bytes,
    )


def parse_verification_key(
    key: Union[Ed25519PublicKey, str, bytes, None],
) -> Optional[Ed25519PublicKey]:
    """Returns the public key to verify signed requests with.

    Accepts the same representations as parse_signing_key, and falls back to
    the HTTPREQ_VERIFICATION_KEY environment variable.

    Raises:
        InvalidArgumentError: if the key cannot be decoded.
    """
    if isinstance(key, Ed25519PublicKey):
        return key
    return _parse_key(
        key,
        VERIFICATION_KEY_ENVVAR,
        "verification key",
        public_key_from_pem,
        public_key_from_bytes,
    )


@dataclass(slots=True)
class KeyResolver(HTTPSignatureKeyResolver):
    """KeyResolver provides the public and private keys of a single key ID."""

    key_id: str
    public_key: Ed25519PublicKey | None = None
    private_key: Ed25519PrivateKey | None = None

    def resolve_public_key(self, key_id: str):
        if key_id != self.key_id or self.public_key is None:
            raise ValueError(f"public key '{key_id}' not available")

        return self.public_key

    def resolve_private_key(self, key_id: str):
        if key_id != self.key_id or self.private_key is None:
            raise ValueError(f"private key '{key_id}' not available")

        return self.private_key
