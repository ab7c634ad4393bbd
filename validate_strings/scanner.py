"""Character-level state machine for ``"key" = "value";`` resource files."""

from __future__ import annotations

from collections.abc import Callable

from .config import ValidatorConfig
from .models import KEY_START, ParseState, Position, ScanContext, ScanState
from .reporter import DiagnosticReporter

EXPECTED_KEY = "expected key"
EXPECTED_EQUALS = "expected '='"
EXPECTED_VALUE = "expected value string"
EXPECTED_SEMICOLON = "expected ';'"
EXPECTED_COMMENT_START = "expected comment start"

END_OF_FILE_EXPECTATIONS = {
    ParseState.AWAITING_KEY_END: "end of key",
    ParseState.AWAITING_EQUALS: "'='",
    ParseState.AWAITING_VALUE_START: "value string",
    ParseState.AWAITING_VALUE_END: "end of value",
    ParseState.AWAITING_SEMICOLON: "';'",
    ParseState.AWAITING_COMMENT_START: "comment start",
    ParseState.AWAITING_COMMENT_END: "end of comment",
    ParseState.AWAITING_COMMENT_CLOSE: "end of comment",
}

SKIP_LINE = ScanState.detour(ParseState.AWAITING_NEXT_LINE, KEY_START)


def is_inert(char: str, config: ValidatorConfig) -> bool:
    """Return True when `char` is whitespace that may separate tokens.

    Examples:
        is_inert("\\t", ValidatorConfig())  # True
        is_inert("\\t", ValidatorConfig(unicode_whitespace=False))  # False
    """
    if config.unicode_whitespace:
        return char.isspace()
    return char == " "


def _open_comment(ctx: ScanContext) -> None:
    ctx.state = ScanState.detour(ParseState.AWAITING_COMMENT_START, ctx.state)


def _fail_line(
    ctx: ScanContext,
    reporter: DiagnosticReporter,
    message: str,
    related: Position | None = None,
) -> None:
    reporter.error(message, ctx.position, related)
    ctx.state = SKIP_LINE


def _on_key_start(ctx, char, reporter, config) -> bool:
    if char == '"':
        ctx.state = ScanState.at(ParseState.AWAITING_KEY_END)
        ctx.key_position = ctx.position
    elif char == "/":
        _open_comment(ctx)
    elif not is_inert(char, config):
        _fail_line(ctx, reporter, EXPECTED_KEY)
    return False


def _on_key_end(ctx, char, reporter, config) -> bool:
    if char == '"':
        ctx.state = ScanState.at(ParseState.AWAITING_EQUALS)
    return False


def _on_equals(ctx, char, reporter, config) -> bool:
    if char == "=":
        ctx.state = ScanState.at(ParseState.AWAITING_VALUE_START)
    elif char == "/":
        _open_comment(ctx)
    elif not is_inert(char, config):
        _fail_line(ctx, reporter, EXPECTED_EQUALS, ctx.key_position)
    return False


def _on_value_start(ctx, char, reporter, config) -> bool:
    if char == '"':
        ctx.state = ScanState.at(ParseState.AWAITING_VALUE_END)
    elif char == "/":
        _open_comment(ctx)
    elif not is_inert(char, config):
        _fail_line(ctx, reporter, EXPECTED_VALUE, ctx.key_position)
    return False


def _on_value_end(ctx, char, reporter, config) -> bool:
    if char == '"':
        ctx.state = ScanState.at(ParseState.AWAITING_SEMICOLON)
    return False


def _on_semicolon(ctx, char, reporter, config) -> bool:
    if char == ";":
        ctx.state = KEY_START
    elif char == "/":
        _open_comment(ctx)
    elif not is_inert(char, config):
        reporter.error(EXPECTED_SEMICOLON, ctx.position, ctx.key_position)
        # The character may open the next key.
        ctx.state = KEY_START
        return True
    return False


def _on_comment_start(ctx, char, reporter, config) -> bool:
    resume = ctx.state.resume
    if char == "/":
        ctx.state = ScanState.detour(ParseState.AWAITING_NEXT_LINE, resume)
    elif char == "*":
        ctx.state = ScanState.detour(ParseState.AWAITING_COMMENT_END, resume)
    elif config.strict_comments:
        related = None if resume.kind is ParseState.AWAITING_KEY_START else ctx.key_position
        _fail_line(ctx, reporter, EXPECTED_COMMENT_START, related)
    else:
        ctx.state = resume
    return False


def _on_comment_end(ctx, char, reporter, config) -> bool:
    if char == "*":
        ctx.state = ScanState.detour(ParseState.AWAITING_COMMENT_CLOSE, ctx.state.resume)
    return False


def _on_comment_close(ctx, char, reporter, config) -> bool:
    if char == "/":
        ctx.state = ctx.state.resume
    elif char != "*" and not is_inert(char, config):
        ctx.state = ScanState.detour(ParseState.AWAITING_COMMENT_END, ctx.state.resume)
    return False


def _on_next_line(ctx, char, reporter, config) -> bool:
    return False


Handler = Callable[[ScanContext, str, DiagnosticReporter, ValidatorConfig], bool]

HANDLERS: dict[ParseState, Handler] = {
    ParseState.AWAITING_KEY_START: _on_key_start,
    ParseState.AWAITING_KEY_END: _on_key_end,
    ParseState.AWAITING_EQUALS: _on_equals,
    ParseState.AWAITING_VALUE_START: _on_value_start,
    ParseState.AWAITING_VALUE_END: _on_value_end,
    ParseState.AWAITING_SEMICOLON: _on_semicolon,
    ParseState.AWAITING_COMMENT_START: _on_comment_start,
    ParseState.AWAITING_COMMENT_END: _on_comment_end,
    ParseState.AWAITING_COMMENT_CLOSE: _on_comment_close,
    ParseState.AWAITING_NEXT_LINE: _on_next_line,
}


def advance_line(ctx: ScanContext) -> None:
    """Move the context past a newline, ending any line skip or line comment."""
    ctx.line += 1
    ctx.column = 0
    if ctx.state.kind is ParseState.AWAITING_NEXT_LINE:
        ctx.state = ctx.state.resume


def step(
    ctx: ScanContext,
    char: str,
    reporter: DiagnosticReporter,
    config: ValidatorConfig,
) -> bool:
    """Apply one non-newline character to the current state.

    The column must already point at `char`.

    Args:
        ctx: Scan context to update.
        char: Character being consumed.
        reporter: Receives diagnostics for malformed input.
        config: Whitespace and comment strictness options.

    Returns:
        bool: True when the same character must be fed to the new state again.
    """
    return HANDLERS[ctx.state.kind](ctx, char, reporter, config)


def end_position(ctx: ScanContext) -> Position:
    """Position just past the last consumed character."""
    return Position(ctx.line, ctx.column + 1)


def finish(ctx: ScanContext, reporter: DiagnosticReporter) -> None:
    """Report an unterminated construct left open at the end of the stream.

    A pending line skip or line comment is not an error: the rest of the last
    line is discarded content.
    """
    state = ctx.state
    if state.kind in (ParseState.AWAITING_KEY_START, ParseState.AWAITING_NEXT_LINE):
        return

    expectation = END_OF_FILE_EXPECTATIONS[state.kind]
    reporter.error(
        f"end of file reached when expecting {expectation}",
        end_position(ctx),
        ctx.key_position,
    )


def scan(
    text: str, reporter: DiagnosticReporter, config: ValidatorConfig | None = None
) -> ScanContext:
    """Validate `text` in a single left-to-right pass.

    Malformed tokens are reported through `reporter` and scanning continues;
    the end-of-stream check is left to `finish`.

    Args:
        text: Full resource file content.
        reporter: Receives diagnostics.
        config: Scanner options; defaults to a new `ValidatorConfig`.

    Returns:
        ScanContext: Final scanner context.

    Examples:
        ctx = scan('"a" = "b";\\n', reporter)
        finish(ctx, reporter)
    """
    config = config or ValidatorConfig()
    ctx = ScanContext()

    for char in text:
        if char == "\n":
            advance_line(ctx)
            continue

        ctx.column += 1
        while step(ctx, char, reporter, config):
            pass

    return ctx
