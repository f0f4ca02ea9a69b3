"""
Errors raised by the provisioning and bootstrap steps.

Per-file failures in the polling loop are reported, not raised.
"""


class AutoEncryptError(Exception):
    """Base class for all pipeline errors."""


class ProvisioningError(AutoEncryptError):
    """The age release could not be downloaded or unpacked."""


class KeyGenerationError(AutoEncryptError):
    """age-keygen did not produce a usable public key."""


class BootstrapError(AutoEncryptError):
    """Startup could not complete; the watcher must not start."""
