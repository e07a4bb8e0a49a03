from __future__ import annotations

import msgspec

from ..capabilities import ToInlineQueryId, to_inline_query_id
from ..refs import InlineQueryId
from ..responses import JsonTrueToUnitResponse
from ..types import InlineQueryResult
from ._base import Request


class AnswerInlineQuery(Request, kw_only=True):
    method_name = "answerInlineQuery"
    response_type = JsonTrueToUnitResponse()

    inline_query_id: InlineQueryId
    results: list[InlineQueryResult] = msgspec.field(default_factory=list)
    is_personal: bool
    cache_time: int | None = None
    next_offset: str | None = None
    switch_pm_text: str | None = None
    switch_pm_parameter: str | None = None

    def add_inline_result(self, result: InlineQueryResult) -> None:
        self.results.append(result)


def answer_inline_query(
    query: ToInlineQueryId,
    results: list[InlineQueryResult] | None = None,
    switch_pm_text: str | None = None,
    switch_pm_parameter: str | None = None,
    *,
    is_personal: bool = True,
    cache_time: int | None = None,
    next_offset: str | None = None,
) -> AnswerInlineQuery:
    return AnswerInlineQuery(
        inline_query_id=to_inline_query_id(query),
        results=list(results or []),
        is_personal=is_personal,
        cache_time=cache_time,
        next_offset=next_offset,
        switch_pm_text=switch_pm_text,
        switch_pm_parameter=switch_pm_parameter,
    )
