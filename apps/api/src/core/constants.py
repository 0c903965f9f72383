"""Shared API constants."""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# OFFSET is a signed 64-bit integer in Postgres; (page - 1) * MAX_PAGE_SIZE must fit.
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_PAGE_SIZE

# Date-only query parameters (birthDateFrom, registrationDateTo, ...)
DATE_FORMAT = "%Y-%m-%d"
