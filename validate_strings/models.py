"""Data models for validate-strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class ParseState(Enum):
    """Positions in the key/value/comment grammar.

    Attributes:
        AWAITING_KEY_START: Between entries, expecting the opening quote of a key.
        AWAITING_KEY_END: Inside a quoted key.
        AWAITING_EQUALS: After a key, expecting ``=``.
        AWAITING_VALUE_START: After ``=``, expecting the opening quote of a value.
        AWAITING_VALUE_END: Inside a quoted value.
        AWAITING_SEMICOLON: After a value, expecting ``;``.
        AWAITING_COMMENT_START: Seen ``/``, expecting ``/`` or ``*``.
        AWAITING_COMMENT_END: Inside a block comment.
        AWAITING_COMMENT_CLOSE: Seen ``*`` inside a block comment, expecting ``/``.
        AWAITING_NEXT_LINE: Discarding the rest of the line.
    """

    AWAITING_KEY_START = auto()
    AWAITING_KEY_END = auto()
    AWAITING_EQUALS = auto()
    AWAITING_VALUE_START = auto()
    AWAITING_VALUE_END = auto()
    AWAITING_SEMICOLON = auto()
    AWAITING_COMMENT_START = auto()
    AWAITING_COMMENT_END = auto()
    AWAITING_COMMENT_CLOSE = auto()
    AWAITING_NEXT_LINE = auto()


DETOUR_KINDS = frozenset(
    {
        ParseState.AWAITING_COMMENT_START,
        ParseState.AWAITING_COMMENT_END,
        ParseState.AWAITING_COMMENT_CLOSE,
        ParseState.AWAITING_NEXT_LINE,
    }
)


@dataclass(frozen=True)
class ScanState:
    """Current scanner state, including where to resume after a detour.

    Comment and skip-to-next-line states own the state they return to, so a
    comment opened between ``=`` and the value resumes exactly there.

    Attributes:
        kind: Grammar position.
        resume: State to return to once a comment or line skip completes;
            None for grammar states.

    Examples:
        ScanState.detour(ParseState.AWAITING_COMMENT_START, ScanState.at(ParseState.AWAITING_EQUALS))
    """

    kind: ParseState
    resume: ScanState | None = None

    def __post_init__(self):
        if (self.kind in DETOUR_KINDS) != (self.resume is not None):
            raise ValueError(f"{self.kind.name} requires a resume state only for detours")

    @classmethod
    def at(cls, kind: ParseState) -> ScanState:
        return cls(kind)

    @classmethod
    def detour(cls, kind: ParseState, resume: ScanState) -> ScanState:
        return cls(kind, resume)

    @property
    def is_detour(self) -> bool:
        return self.resume is not None


KEY_START = ScanState.at(ParseState.AWAITING_KEY_START)


@dataclass(frozen=True)
class Position:
    """One-based line and column of a character in the source text."""

    line: int
    column: int


class Severity(Enum):
    """Diagnostic severities understood by build tools."""

    ERROR = "error"
    NOTE = "note"


@dataclass(frozen=True)
class Diagnostic:
    """A single message attached to a file position.

    Attributes:
        path: File the diagnostic refers to.
        severity: Error or note.
        message: Human readable text.
        line: One-based line number.
        column: One-based column number.
    """

    path: str
    severity: Severity
    message: str
    line: int
    column: int

    @property
    def header(self) -> str:
        return f"{self.path}:{self.line}:{self.column}: {self.severity.value}: {self.message}"


@dataclass
class ScanContext:
    """Mutable scanner state threaded through the scan loop.

    Attributes:
        state: Current scanner state.
        line: Line of the character being scanned.
        column: Column of the character being scanned.
        key_position: Where the most recently opened key starts, if any.
    """

    state: ScanState = KEY_START
    line: int = 1
    column: int = 0
    key_position: Position | None = None

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)


@dataclass(frozen=True)
class SourceText:
    """File content together with its line table.

    Attributes:
        text: Full decoded file content.
        lines: Content split on ``\\n``, keeping empty lines.
    """

    text: str
    lines: tuple[str, ...]


@dataclass
class ValidationResult:
    """Outcome of validating one resource file.

    Attributes:
        diagnostics: Diagnostics in emission order, notes included.
        failed: True when at least one error was reported.
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    failed: bool = False

    @property
    def error_count(self) -> int:
        return sum(1 for diagnostic in self.diagnostics if diagnostic.severity is Severity.ERROR)
