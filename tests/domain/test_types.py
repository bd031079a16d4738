"""Tests for domain marker and enum types — parametrized."""

import copy
import pickle

import pytest

from optval.domain.types import EMPTY, CopyMode, Empty, SlotState

ENUM_CASES = [
    (
        SlotState,
        {"empty", "holding"},
    ),
    (
        CopyMode,
        {"deep", "shallow"},
    ),
]


@pytest.mark.parametrize(
    "enum_cls,expected_values",
    ENUM_CASES,
    ids=[cls.__name__ for cls, _ in ENUM_CASES],
)
def test_enum_members_and_values(enum_cls: type, expected_values: set[str]) -> None:
    """Each StrEnum has the expected members with matching string values."""
    actual_values = {e.value for e in enum_cls}
    assert actual_values == expected_values
    for member in enum_cls:
        assert member == member.value
        assert isinstance(member, str)


class TestEmptyMarker:
    def test_single_member(self) -> None:
        assert list(Empty) == [EMPTY]

    def test_not_none(self) -> None:
        assert EMPTY is not None
        assert EMPTY != None  # noqa: E711

    def test_repr(self) -> None:
        assert repr(EMPTY) == "EMPTY"

    def test_identity_survives_copy_and_pickle(self) -> None:
        assert copy.copy(EMPTY) is EMPTY
        assert copy.deepcopy(EMPTY) is EMPTY
        assert pickle.loads(pickle.dumps(EMPTY)) is EMPTY
