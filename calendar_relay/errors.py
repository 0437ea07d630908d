from __future__ import annotations


class RelayError(Exception):
    """Base class for every failure that aborts a relay invocation."""


class ConfigurationError(RelayError):
    pass


class AuthenticationError(RelayError):
    pass


class TransportError(RelayError):
    pass


class ParameterStoreError(RelayError):
    def __init__(self, name: str, code: str, message: str | None = None):
        self.name = name
        self.code = code
        super().__init__(message or f"SSM parameter {name!r} failed with {code}")


class ParameterNotFoundError(ParameterStoreError):
    def __init__(self, name: str):
        super().__init__(name, "ParameterNotFound", f"SSM parameter {name!r} not found")
