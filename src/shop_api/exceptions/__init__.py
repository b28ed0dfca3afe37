# shop_api/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py           # Errors raised by services (AppError, AuthorizationDenied, DatabaseError)
# │   ├── codes.py          # Canonical error codes + code -> HTTP status table
# │   ├── db_classifier.py  # SQL Server error number -> code
# │   ├── classifier.py     # exception -> failure kind
# │   ├── mapper.py         # failure kind -> ErrorResponse (+ one log entry)
# │   └── catalog.py        # user-facing text per code and locale
from .base import AppError, AuthorizationDenied, DatabaseError
from .codes import ErrorCode, status_for_code
from .classifier import classify_failure
from .mapper import ErrorResponse, map_failure

__all__ = [
    "AppError",
    "AuthorizationDenied",
    "DatabaseError",
    "ErrorCode",
    "ErrorResponse",
    "classify_failure",
    "map_failure",
    "status_for_code",
]
