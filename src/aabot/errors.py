"""Exceptions raised by the configuration store."""


class ConfigurationError(Exception):
    """Encrypting, decrypting or persisting the configuration failed."""


class EncryptionUnavailable(ConfigurationError):
    """The round-trip self-test failed for a freshly generated salt."""


class DecryptionError(ConfigurationError):
    """A stored value failed authentication under the given salt."""
