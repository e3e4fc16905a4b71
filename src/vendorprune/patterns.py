"""Keep-pattern matching against vendor-relative paths.

Patterns are matched against the whole slash-separated path. Within a
segment `*`, `?` and `[...]` never cross a `/`; a `**` segment matches zero
or more whole segments. `{a,b}` alternatives are expanded before matching.
"""

import fnmatch

from vendorprune.errors import ConfigurationError


class KeepMatcher:
    """Matches relative paths against a list of keep patterns."""

    def __init__(self, patterns: list[str] | tuple[str, ...]) -> None:
        self.patterns = tuple(patterns)
        self._compiled: list[tuple[str, ...]] = []
        for pattern in self.patterns:
            if not pattern:
                raise ConfigurationError("Bad keep pattern: empty pattern")
            for expanded in expand_braces(pattern):
                self._compiled.append(tuple(_translate(s, pattern) for s in expanded.split("/")))

    def match(self, path: str) -> bool:
        """Check if the path matches any keep pattern."""
        parts = tuple(path.split("/"))
        return any(_match_parts(compiled, parts) for compiled in self._compiled)


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` alternatives (nested groups allowed)."""
    start = _find_unescaped(pattern, "{", 0)
    if start < 0:
        if _find_unescaped(pattern, "}", 0) >= 0:
            raise ConfigurationError(f"Bad keep pattern: unbalanced '}}' in {pattern!r}")
        return [pattern]

    depth = 0
    options: list[str] = []
    last = start + 1
    i = start
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                options.append(pattern[last:i])
                break
        elif ch == "," and depth == 1:
            options.append(pattern[last:i])
            last = i + 1
        i += 1
    else:
        raise ConfigurationError(f"Bad keep pattern: unbalanced '{{' in {pattern!r}")

    prefix, suffix = pattern[:start], pattern[i + 1 :]
    expanded: list[str] = []
    for option in options:
        expanded.extend(expand_braces(prefix + option + suffix))
    return expanded


def _find_unescaped(text: str, char: str, start: int) -> int:
    i = start
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == char:
            return i
        i += 1
    return -1


def _translate(segment: str, pattern: str) -> str:
    """Rewrite one segment into fnmatch syntax.

    `\\x` becomes a literal and `[^...]` becomes `[!...]`.
    """
    if segment == "**":
        return segment

    out: list[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == "\\":
            if i + 1 >= len(segment):
                raise ConfigurationError(f"Bad keep pattern: trailing '\\' in {pattern!r}")
            out.append(f"[{segment[i + 1]}]")
            i += 2
        elif ch == "[":
            end = segment.find("]", i + 2)
            if end < 0:
                raise ConfigurationError(f"Bad keep pattern: unclosed '[' in {pattern!r}")
            body = segment[i + 1 : end]
            if body.startswith("^"):
                body = "!" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _match_parts(pattern: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    if not pattern:
        return not parts

    head, rest = pattern[0], pattern[1:]
    if head == "**":
        return any(_match_parts(rest, parts[i:]) for i in range(len(parts) + 1))
    if not parts:
        return False
    return fnmatch.fnmatchcase(parts[0], head) and _match_parts(rest, parts[1:])
