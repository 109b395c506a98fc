from __future__ import annotations

from typing import Optional

from ..domain import SearchList, SearchRequest, SearchStatus, SearchType
from .models import SearchFilter, coerce_model
from .registry import register_api
from .state import api_state
from .validation import clean_choice, clean_limit, clean_optional_text, clean_search_query, tool_errors


@register_api(
    "search",
    description="Search Things. Opens Things and shows the results for the query across to-dos, projects and areas.",
    category="search",
    tags=("search",),
)
def search(query: str) -> str:
    with tool_errors("search"):
        context = api_state.checked("search", requires_auth=False)
        request = SearchRequest(query=clean_search_query(query))
        context.things.search(request)
    return f'Successfully performed search for: "{request.query}". Things app is now showing search results.'


def build_search_request(query: str, filter: Optional[SearchFilter], limit: Optional[int]) -> SearchRequest:
    options = coerce_model(SearchFilter, filter, field="filter") if filter is not None else SearchFilter()
    date_range = options.date_range
    return SearchRequest(
        query=clean_search_query(query),
        status=clean_choice(options.status, SearchStatus, "status"),
        type=clean_choice(options.type, SearchType, "type"),
        area=clean_optional_text(options.area, "area"),
        project=clean_optional_text(options.project, "project"),
        tag=clean_optional_text(options.tag, "tag"),
        list=clean_choice(options.list, SearchList, "list"),
        start_date=clean_optional_text(date_range.start, "start") if date_range else None,
        end_date=clean_optional_text(date_range.end, "end") if date_range else None,
        limit=clean_limit(limit),
    )


@register_api(
    "search_advanced",
    description=(
        "Search Things with filters for status, item type, area, project, tag, list and date range. "
        "Filters are passed to Things alongside the query."
    ),
    category="search",
    tags=("search", "filters"),
)
def search_advanced(query: str, filter: Optional[SearchFilter] = None, limit: Optional[int] = None) -> str:
    with tool_errors("perform advanced search"):
        context = api_state.checked("search", requires_auth=False)
        request = build_search_request(query, filter, limit)
        context.things.search(request)

    message = f'Successfully executed advanced search for: "{request.query}"'
    if request.applied_filters:
        message += f"\nApplied filters: {', '.join(request.applied_filters)}"
    if request.limit is not None:
        message += f"\nResult limit: {request.limit}"
    return message
