"""Line-oriented output for the pretty-printer.

``LineWriter`` owns all mutable state of a single print call: the current
indentation level, how many literal/keep-space elements are open, where the
current line stands, and the first error the output sink raised. Once the
sink has failed every later write is dropped, so the recursive walk above
never has to check for errors itself.
"""

from __future__ import annotations


def text_width(text: str) -> int:
    """Width of ``text`` in bytes, as it will be written (UTF-8)."""
    if text.isascii():
        return len(text)
    return len(text.encode("utf-8", "surrogatepass"))


class LineWriter:
    __slots__ = (
        "error",
        "indent_unit",
        "keep_space_depth",
        "level",
        "line_start",
        "line_width",
        "literal_depth",
        "out",
        "wrap_width",
    )

    def __init__(self, out, indent_unit="  ", wrap_width=0):
        self.out = out
        self.indent_unit = indent_unit
        self.wrap_width = wrap_width

        self.level = 0  # current indentation level
        self.literal_depth = 0  # open literal elements (script, style, ...)
        self.keep_space_depth = 0  # open keep-space elements (pre)
        self.line_start = True
        self.line_width = 0
        self.error = None  # first exception raised by out.write()

    @property
    def in_literal(self):
        return self.literal_depth > 0

    @property
    def in_keep_space(self):
        return self.keep_space_depth > 0

    @property
    def verbatim(self):
        """True while output must reproduce the source exactly."""
        return self.literal_depth > 0 or self.keep_space_depth > 0

    def write(self, token: str) -> None:
        """Write ``token`` as-is and advance the current line."""
        if self.error is not None:
            return
        if token:
            try:
                self.out.write(token)
            except (OSError, ValueError) as exc:
                self.error = exc
                return
        self.line_start = False
        self.line_width += text_width(token)

    def indent(self) -> None:
        """Write the indentation for the current level at the start of a line."""
        if self.verbatim or not self.line_start:
            return
        self.write(self.indent_unit * self.level)

    def end_line(self) -> None:
        """Terminate the current line unless it is empty or output is verbatim."""
        if self.verbatim or self.line_start:
            return
        self.write("\n")
        self.line_start = True
        self.line_width = 0

    def would_overflow(self, width: int) -> bool:
        return self.wrap_width > 0 and self.line_width + width > self.wrap_width

    def wrap(self, token: str, continuation: str = "") -> None:
        """Write ``token``, first breaking the line if it would not fit.

        After a break the token loses its leading spaces and gets
        ``continuation`` in addition to the normal indentation.
        """
        if not self.verbatim and self.would_overflow(text_width(token)):
            self.end_line()
            self.indent()
            token = continuation + token.lstrip(" ")
        self.write(token)
