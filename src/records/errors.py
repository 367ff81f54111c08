"""Error taxonomy for score-record parsing and the command-line boundary."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Every way a run can fail, tagged with the process exit code it maps to."""

    USAGE_ERROR = "UsageError"
    INVALID_COUNT = "InvalidCount"
    FILE_NOT_FOUND = "FileNotFound"
    INVALID_SCORE = "InvalidScore"
    INVALID_RECORD_JSON = "InvalidRecordJSON"
    INVALID_RECORD_SHAPE = "InvalidRecordShape"
    INVALID_RECORD_MISSING_ID = "InvalidRecordMissingId"
    OTHER_IO_ERROR = "OtherIOError"

    @property
    def exit_code(self) -> int:
        if self in (ErrorKind.USAGE_ERROR, ErrorKind.FILE_NOT_FOUND):
            return 1
        return 2


class RecordValidationError(ValueError):
    """Raised when an input line (or the requested count) fails validation."""

    def __init__(self, kind: ErrorKind, message: str, *, line_no: int | None = None) -> None:
        self.kind = kind
        self.message = message
        self.line_no = line_no
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line_no is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.kind.value} (line {self.line_no}): {self.message}"
