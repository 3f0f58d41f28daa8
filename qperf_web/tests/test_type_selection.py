import pytest

from qperf_web.domain.models import QuestionType as T
from qperf_web.services.type_selection import select_types, toggles_from_codes


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([True] * 9, (T.A, T.G, T.I, T.Q, T.R, T.S, T.X, T.V, T.M)),
        ([False] * 9, ()),
        ([False, False, False, True, True, False, False, True, True], (T.Q, T.R, T.V, T.M)),
        ([True, False, False, False, False, False, False, False, False], (T.A,)),
        ([False, False, False, False, False, False, False, False, True], (T.M,)),
    ],
)
def test_positional_toggles(flags, expected):
    assert select_types(flags) == expected


def test_positional_wrong_length_raises():
    with pytest.raises(ValueError):
        select_types([True] * 8)


def test_mapping_missing_members_are_off():
    assert select_types({T.S: True, T.G: True}) == (T.G, T.S)


def test_mapping_insertion_order_does_not_matter():
    forward = {t: True for t in (T.A, T.X, T.M)}
    backward = {t: True for t in (T.M, T.X, T.A)}
    assert select_types(forward) == select_types(backward) == (T.A, T.X, T.M)


def test_toggles_from_codes_ignores_unknown_and_case():
    toggles = toggles_from_codes(["v", "Z", " q ", T.M, ""])

    assert select_types(toggles) == (T.Q, T.V, T.M)
    assert len(toggles) == 9
    assert toggles[T.A] is False


def test_question_type_labels():
    assert T.A.label == "A"
    assert T.M.label == "Memory Verse totals (Q, R, V)"
