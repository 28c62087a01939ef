"""Example: building a bug-report search and evaluating it in memory.

Run with::

    python docs/examples/bug_report_search.py
"""

from __future__ import annotations

import asyncio
import logging

from advanced_search.builder import SearchBuilder
from advanced_search.engine import InMemorySearchEngine
from advanced_search.observability.logging import JsonLoggerFactory, get_logger
from advanced_search.schema import FieldType, SearchField
from advanced_search.validation import RangeOrderRule, RegexPatternRule

FIELDS = [
    SearchField("title", "Title", FieldType.STRING),
    SearchField("severity", "Severity", FieldType.NUMBER),
    SearchField("status", "Status", FieldType.ENUM, options=("PENDING", "IN_PROGRESS", "DONE")),
    SearchField("createdAt", "Created", FieldType.DATE),
    SearchField("assignee", "Assignee", FieldType.STRING, sortable=False),
]

REPORTS = [
    {"id": 1, "title": "Login page crash", "severity": 5, "status": "PENDING",
     "createdAt": "2024-01-03", "assignee": None},
    {"id": 2, "title": "Slow export", "severity": 2, "status": "DONE",
     "createdAt": "2024-01-10", "assignee": "kim"},
    {"id": 3, "title": "Login timeout", "severity": 3, "status": "IN_PROGRESS",
     "createdAt": "2024-01-21", "assignee": "ana"},
]

log = get_logger("examples.bug_report_search")


async def main() -> None:
    builder = SearchBuilder(
        FIELDS,
        on_change=lambda config: log.info("config_changed", conditions=len(config.filter_conditions)),
        rules=[RegexPatternRule(), RangeOrderRule()],
    )
    builder.add_condition("title", "contains", "login")
    builder.add_condition("status", "in", ["PENDING", "IN_PROGRESS"])
    builder.add_condition("createdAt", "between", ["2024-01-01", "2024-01-31"])
    builder.add_sort("severity", "desc")

    errors = builder.validate()
    if errors:
        log.warning("invalid_search", errors=[e.to_dict() for e in errors])
        return

    query = builder.to_query_string()
    log.info("query_string", query=query)

    # a second session bootstrapped from the URL sees the same search
    restored = SearchBuilder(FIELDS)
    restored.import_from_query_string(query)

    result = await InMemorySearchEngine(REPORTS).search(restored.config)
    log.info("search_result", total=result.total, ids=[r["id"] for r in result.items])


if __name__ == "__main__":
    JsonLoggerFactory.configure(logging.INFO)
    asyncio.run(main())
