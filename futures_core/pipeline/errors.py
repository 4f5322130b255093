from __future__ import annotations

from typing import Optional


class PipelineError(Exception):
    """Base class for every fatal load/parse failure."""


class MissingHeaderError(PipelineError):
    def __init__(self, message: str = "input has no header row"):
        super().__init__(message)


class SchemaValidationError(PipelineError):
    """A row (or JSON payload) does not match the expected schema."""

    def __init__(self, message: str, *, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class FieldCountError(SchemaValidationError):
    def __init__(self, line: int, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} fields, found {found}", line=line)


class FetchError(PipelineError):
    def __init__(self, url: str, message: str, *, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"{url}: {message}")
