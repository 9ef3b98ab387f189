"""Suite registration for the web-component-tester harness.

The harness entry file (``app/test/index.html``) lists the suites to run in a
``WCT.loadSuites([...])`` call.  Registering a suite means:

1. turning every single quote in the file into a double quote so the list
   literal is valid JSON,
2. locating the list after the marker with a bracket-depth scan,
3. parsing it, appending the plain and ``?dom=shadow`` entries,
4. serializing it one entry per line with single quotes,
5. splicing it back in place and tidying the whole file.

Step 1 is global: any other single-quoted string in the file comes back
double-quoted.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from dataclasses import dataclass

from el_scaffold.errors import DirectiveNotFoundError, MalformedDirectiveError

MARKER_PATTERN = re.compile(r"WCT\.loadSuites\s*\(")
SHADOW_DOM_SUFFIX = "?dom=shadow"


@dataclass(frozen=True)
class SuiteList:
    """A located suite list inside quote-normalized harness text.

    ``start``/``end`` delimit ``raw`` (brackets included, ``end`` exclusive).
    ``indent`` is the leading whitespace of the line holding the marker.
    """

    start: int
    end: int
    raw: str
    suites: tuple[str, ...]
    indent: str = ""


# ---------------------------------------------------------------------------
# Locating and parsing
# ---------------------------------------------------------------------------


def normalize_quotes(text: str) -> str:
    """Replace every single quote in *text* with a double quote."""
    return text.replace("'", '"')


def _find_list_end(text: str, start: int, source: str | None = None) -> int:
    """Index just past the ``]`` matching the ``[`` at *start*.

    Brackets inside double-quoted strings are ignored.
    """
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index + 1
    raise MalformedDirectiveError("suite list is never closed", path=source)


def _line_indent(text: str, position: int) -> str:
    line_start = text.rfind("\n", 0, position) + 1
    line = text[line_start:position]
    return line[: len(line) - len(line.lstrip())]


def locate_suite_list(text: str, source: str | None = None) -> SuiteList:
    """Find and parse the suite list in already quote-normalized *text*.

    Raises:
        DirectiveNotFoundError: No marker, or the marker's first argument is
            not a list.
        MalformedDirectiveError: The list is unterminated, is not valid JSON,
            or holds something other than strings.
    """
    match = MARKER_PATTERN.search(text)
    if match is None:
        raise DirectiveNotFoundError("no WCT.loadSuites(...) directive found", path=source)

    start = match.end()
    while start < len(text) and text[start].isspace():
        start += 1
    if start >= len(text) or text[start] != "[":
        raise DirectiveNotFoundError(
            "WCT.loadSuites(...) is not called with a list literal", path=source
        )

    end = _find_list_end(text, start, source)
    raw = text[start:end]
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedDirectiveError(
            f"suite list is not a valid array: {exc.msg}", path=source
        ) from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise MalformedDirectiveError("suite list must contain only strings", path=source)

    return SuiteList(
        start=start,
        end=end,
        raw=raw,
        suites=tuple(value),
        indent=_line_indent(text, match.start()),
    )


def read_suites(text: str) -> list[str]:
    """Return the suites currently registered in harness *text*."""
    return list(locate_suite_list(normalize_quotes(text)).suites)


# ---------------------------------------------------------------------------
# Serializing and rewriting
# ---------------------------------------------------------------------------


def serialize_suites(suites: list[str], indent: str = "") -> str:
    """Render *suites* as a single-quoted list, one entry per line.

    Continuation lines are prefixed with *indent* so the closing bracket lines
    up with the line the list starts on.
    """
    body = json.dumps(list(suites), indent=2, ensure_ascii=False)
    return ("\n" + indent).join(body.split("\n")).replace('"', "'")


def tidy_markup(text: str) -> str:
    """Strip trailing spaces and tabs from every line and end with one newline.

    Only ``\\n`` separates lines; other line-break characters are content.
    """
    lines = [line.rstrip(" \t") for line in text.split("\n")]
    return "\n".join(lines).rstrip("\n") + "\n"


def register_suite(
    harness_text: str,
    basic_name: str,
    *,
    formatter: Callable[[str], str] = tidy_markup,
    source: str | None = None,
) -> str:
    """Add *basic_name* to the harness suite list, for light and shadow DOM.

    Returns the full rewritten harness text.  Calling this twice with the same
    name registers it twice.

    Args:
        harness_text: Current contents of the harness entry file.
        basic_name: Suite file name, e.g. ``"x-foo-basic.html"``.
        formatter: Reformatting pass applied to the whole result.
        source: File path used in error messages.
    """
    normalized = normalize_quotes(harness_text)
    directive = locate_suite_list(normalized, source)

    suites = [*directive.suites, basic_name, basic_name + SHADOW_DOM_SUFFIX]
    rendered = serialize_suites(suites, directive.indent)

    updated = normalized[: directive.start] + rendered + normalized[directive.end :]
    return formatter(updated)
