from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Union

from qperf_web.domain.models import QuestionType

Toggles = Union[Mapping[QuestionType, bool], Sequence[bool]]

TYPE_ORDER: tuple[QuestionType, ...] = tuple(QuestionType)


def select_types(toggles: Toggles) -> tuple[QuestionType, ...]:
    """
    Enabled question types in index order (A, G, I, Q, R, S, X, V, M).

    Accepts either a {QuestionType: bool} mapping (absent members are off)
    or nine positional booleans in index order.
    """
    if isinstance(toggles, Mapping):
        return tuple(t for t in TYPE_ORDER if toggles.get(t, False))

    flags = list(toggles)
    if len(flags) != len(TYPE_ORDER):
        raise ValueError(f"Expected {len(TYPE_ORDER)} type toggles, got {len(flags)}.")
    return tuple(t for t, on in zip(TYPE_ORDER, flags) if on)


def toggles_from_codes(codes: Iterable[Union[str, QuestionType]]) -> dict[QuestionType, bool]:
    wanted = set()
    for c in codes:
        raw = c.value if isinstance(c, QuestionType) else (c or "").strip().upper()
        if raw in QuestionType.__members__:
            wanted.add(QuestionType(raw))
    return {t: t in wanted for t in TYPE_ORDER}
