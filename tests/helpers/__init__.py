from .mocks import AsyncMockTransport, MockTransport, ok
from .factories import (
    class_row,
    envelope_body,
    meal_row,
    result_body,
    school_info_row,
    school_info_rows,
)

__all__ = [
    "MockTransport",
    "AsyncMockTransport",
    "ok",
    "class_row",
    "envelope_body",
    "meal_row",
    "result_body",
    "school_info_row",
    "school_info_rows",
]
