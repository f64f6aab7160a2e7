"""Inclusion pattern matching on relative paths.

Patterns use shell-glob syntax, but wildcards never cross a ``/``:
``dev/*`` matches ``dev/random`` and neither ``dev`` nor
``dev/sub/random``. Matching is done segment by segment with
``fnmatch.fnmatchcase``, so the number of segments in the pattern and
in the path must be equal. A backslash escapes the next character, so
``a\\*b`` matches only the literal name ``a*b``.
"""

import fnmatch
from typing import Iterable, List, Tuple


_SPECIAL = '*?['


def _class_end(segment: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at ``start``, or -1."""
    j = start + 1
    if j < len(segment) and segment[j] in '!^':
        j += 1
    if j < len(segment) and segment[j] == ']':
        # Leading ] is a member
        j += 1
    while j < len(segment):
        if segment[j] == '\\':
            j += 2
            continue
        if segment[j] == ']':
            return j
        j += 1
    return -1


def _translate_class(body: str) -> str:
    """Rewrite a bracket class body into fnmatch form.

    ``^`` negates like ``!``; escaped members are taken literally, with
    ``]`` moved to the front and ``-`` to the back of the class.
    """
    negate = body[:1] in ('!', '^')
    if negate:
        body = body[1:]

    members = []
    bracket = dash = False
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == '\\' and i + 1 < len(body):
            i += 1
            ch = body[i]
            if ch == ']':
                bracket = True
            elif ch == '-':
                dash = True
            else:
                members.append(ch)
        elif ch == ']':
            bracket = True
        else:
            members.append(ch)
        i += 1

    if not negate and not bracket and members[:1] == ['!']:
        # A literal ! must not open the class
        members.append(members.pop(0))
    return ''.join([
        '[',
        '!' if negate else '',
        ']' if bracket else '',
        *members,
        '-' if dash else '',
        ']',
    ])


def _normalize_segment(segment: str) -> str:
    """Translate one pattern segment into ``fnmatch`` syntax.

    ``\\x`` matches ``x`` literally and ``[^...]`` is a negated class,
    as in shell globs. A trailing backslash is a literal backslash.
    """
    if '\\' not in segment and '[' not in segment:
        return segment

    out = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == '\\' and i + 1 < len(segment):
            escaped = segment[i + 1]
            out.append(f'[{escaped}]' if escaped in _SPECIAL else escaped)
            i += 2
            continue
        if ch == '[':
            end = _class_end(segment, i)
            if end < 0:
                # Unterminated class matches a literal [
                out.append('[[]')
                i += 1
                continue
            out.append(_translate_class(segment[i + 1:end]))
            i = end + 1
            continue
        out.append(ch)
        i += 1
    return ''.join(out)


class PatternMatcher:
    """Allow-list of glob patterns evaluated against relative paths.

    The matcher is stateless apart from the pre-split pattern set, so a
    single instance can be shared between traversals.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: Tuple[str, ...] = tuple(patterns)
        self._compiled: List[Tuple[str, ...]] = [
            tuple(_normalize_segment(seg) for seg in pattern.split('/'))
            for pattern in self.patterns
        ]

    @property
    def active(self) -> bool:
        return bool(self.patterns)

    def matches(self, rel_path: str) -> bool:
        """Check a relative path against the pattern set.

        Args:
            rel_path: ``/``-separated path relative to the traversal root

        Returns:
            True if no patterns are configured or any pattern matches
        """
        if not self._compiled:
            return True

        segments = rel_path.split('/')
        for pattern in self._compiled:
            if len(pattern) != len(segments):
                continue
            if all(fnmatch.fnmatchcase(seg, pat) for seg, pat in zip(segments, pattern)):
                return True
        return False

    def __repr__(self) -> str:
        return f"PatternMatcher({list(self.patterns)!r})"
