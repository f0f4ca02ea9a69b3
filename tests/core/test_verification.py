from pathlib import Path

import pytest

from core.pipeline.models import EncryptionOutcome
from core.pipeline.verification import is_trustworthy


def outcome(size, exists=True):
    return EncryptionOutcome(output_path=Path("/out/a.txt.age"), exists=exists, size=size)


@pytest.mark.parametrize("size, expected", [
    (499, False),  # half minus one byte
    (500, False),  # exactly half, comparison is strict
    (501, True),   # one byte above half
    (1200, True),
    (0, False),
])
def test_half_size_threshold(size, expected):
    assert is_trustworthy(outcome(size), 1000) is expected


def test_odd_original_size_uses_fractional_half():
    # half of 1001 is 500.5
    assert is_trustworthy(outcome(500), 1001) is False
    assert is_trustworthy(outcome(501), 1001) is True


def test_missing_output_is_rejected_whatever_its_size():
    assert is_trustworthy(outcome(5000, exists=False), 10) is False


def test_empty_original_accepts_any_existing_output():
    assert is_trustworthy(outcome(1), 0) is True
    assert is_trustworthy(outcome(0), 0) is False
