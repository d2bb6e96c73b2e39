"""Exception types for row-spreader.

Only unparseable input is an error. Missing keys, shape mismatches and empty
values are never raised; they render as blank fields.
"""

from typing import Optional


class RowSpreaderError(Exception):
    """Base class for row-spreader errors."""


class JsonLineError(RowSpreaderError, ValueError):
    """A line of NDJSON input could not be parsed.

    Attributes:
        line_number: 1-based number of the offending line
        source: Name of the input (file path or ``<input>``)
        reason: The JSON decoder's message
    """

    def __init__(self, line_number: int, reason: str, source: Optional[str] = None) -> None:
        self.line_number = line_number
        self.reason = reason
        self.source = source or "<input>"
        super().__init__(f"Can't parse line {line_number} of {self.source}: {reason}")


class SchemaNotCompiledError(RowSpreaderError, RuntimeError):
    """Rows were requested before the header and schema were compiled."""
