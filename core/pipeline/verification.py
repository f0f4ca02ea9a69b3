from typing import Callable

from core.pipeline.models import EncryptionOutcome

VerificationPolicy = Callable[[EncryptionOutcome, int], bool]


def is_trustworthy(outcome: EncryptionOutcome, original_size: int) -> bool:
    """
    Size heuristic: the ciphertext must exist and be larger than half the original.

    Catches truncated output from a crashed or killed age process. It is not a
    cryptographic check; age output is always slightly larger than its input.
    """
    return outcome.exists and outcome.size > original_size / 2
