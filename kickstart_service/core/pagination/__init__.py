"""Keyset pagination with opaque continuation tokens.

Keyset (seek) pagination walks a table in a fixed order,
``(created_at ASC, id ASC)``, and resumes each page strictly after the last
record the client saw. Compared to OFFSET pagination:

- Each page is a single indexed range scan, however deep the client goes
- Records inserted behind the cursor never shift or duplicate later pages
- There is no "page N"; clients can only move forward

Building blocks:
    CursorCodec     - token <-> Cursor (base64url JSON, unsigned)
    KeysetFilter    - ORDER BY, seek WHERE and LIMIT limit+1 on a Select
    assemble_page   - drops the sentinel row and computes the next token
    TokenPage       - response schema ``{records, next_token, has_more, count}``

Example:
    from kickstart_service.core.pagination import (
        PageRequest,
        TokenPage,
    )

    page_request = PageRequest.from_query(next_token, limit)
    result = await user_repo.paginate_keyset(session, select(User), page_request)
    return TokenPage.from_result(result, UserResponse.model_validate)
"""

from kickstart_service.core.pagination.cursor import (
    MAX_TOKEN_LENGTH,
    Cursor,
    CursorCodec,
    make_cursor,
)
from kickstart_service.core.pagination.exceptions import (
    InvalidTokenError,
    PaginationTokenError,
    TokenEncodingError,
)
from kickstart_service.core.pagination.filters import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    KeysetFilter,
    clamp_limit,
)
from kickstart_service.core.pagination.page import (
    KeysetRows,
    PageRequest,
    PageResult,
    assemble_keyset_rows,
    assemble_page,
)
from kickstart_service.core.pagination.schemas import TokenPage

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MAX_TOKEN_LENGTH",
    "Cursor",
    "CursorCodec",
    "InvalidTokenError",
    "KeysetFilter",
    "KeysetRows",
    "PageRequest",
    "PageResult",
    "PaginationTokenError",
    "TokenEncodingError",
    "TokenPage",
    "assemble_keyset_rows",
    "assemble_page",
    "clamp_limit",
    "make_cursor",
]
