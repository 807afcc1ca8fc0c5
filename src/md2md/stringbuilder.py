"""Output sinks for the renderers.

StringBuilder appends to a list and joins once at the end: O(n) total vs
O(n²) for repeated string concatenation. StreamWriter has the same
``append`` surface but forwards every fragment straight to a text stream,
so large documents can be written without building the whole output in
memory.

Thread Safety:
Sink instances are local to each render call.
No shared mutable state.

"""

from __future__ import annotations

from typing import Protocol, TextIO


class Sink(Protocol):
    """Anything a renderer can append output fragments to."""

    def append(self, s: str) -> Sink: ...


class StringBuilder:
    """Efficient string accumulator.

    Appends to a list, joins once at the end.
    O(n) total vs O(n²) for repeated string concatenation.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<h1>")
            >>> sb.append("Hello")
            >>> sb.append("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)


class StreamWriter:
    """Sink that writes each fragment to a text stream immediately.

    Write failures (OSError and friends) propagate to the caller
    unchanged; whatever was written before the failure stays written.

    Usage:
            >>> import io
            >>> buf = io.StringIO()
            >>> _ = StreamWriter(buf).append("<p>").append("hi").append("</p>")
            >>> buf.getvalue()
            '<p>hi</p>'

    """

    __slots__ = ("_stream",)

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def append(self, s: str) -> StreamWriter:
        if s:
            self._stream.write(s)
        return self
