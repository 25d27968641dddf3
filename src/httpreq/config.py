import os
from dataclasses import dataclass
from typing import Optional

SIGNING_KEY_ENVVAR = "HTTPREQ_SIGNING_KEY"
"""Environment variable holding the default Ed25519 private key used to sign
requests."""

VERIFICATION_KEY_ENVVAR = "HTTPREQ_VERIFICATION_KEY"
"""Environment variable holding the default Ed25519 public key used to verify
signed requests."""


@dataclass
class NamedValueFromEnvironment:
    """A setting given explicitly or read from an environment variable.

    The name of the setting reflects where its value came from, so error
    messages can point at the environment variable when that is what needs
    fixing. Values read from the environment are read again when unpickled.
    """

    _envvar: str
    _name: str
    _value: str
    _from_envvar: bool

    def __init__(self, envvar: str, name: str, value: Optional[str] = None):
        self._envvar = envvar
        self._name = name
        if value is None:
            self._load()
        else:
            self._value = value
            self._from_envvar = False

    def _load(self):
        self._value = os.environ.get(self._envvar) or ""
        self._from_envvar = True

    def __str__(self):
        return self._value

    def __bool__(self):
        return bool(self._value)

    def __getstate__(self):
        return (self._envvar, self._name, self._value, self._from_envvar)

    def __setstate__(self, state):
        (self._envvar, self._name, self._value, self._from_envvar) = state
        if self._from_envvar:
            self._load()

    @property
    def envvar(self) -> str:
        return self._envvar

    @property
    def name(self) -> str:
        return self._envvar if self._from_envvar else self._name

    @property
    def value(self) -> str:
        return self._value

    @property
    def from_envvar(self) -> bool:
        return self._from_envvar
