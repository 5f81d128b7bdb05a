"""Exceptions raised while parsing and pretty-printing documents."""

from html5lib.constants import E


class PrintError(Exception):
    """The tree handed to the printer does not have a printable shape.

    Raised for a root that is not a document, or for a child whose kind is
    not allowed where it appears. ``node`` is the offending node.
    """

    def __init__(self, message, node=None):
        super().__init__(message)
        self.node = node


class TagTableError(RuntimeError):
    """The static tag tables contradict each other.

    Signals a defect in :mod:`htmlpretty.constants`, not in the input; it is
    not a :class:`PrintError`.
    """


class ParseError:
    """One entry of html5lib's error list: ``((line, column), code, datavars)``.

    ``code`` is html5lib's error code, e.g. ``"expected-doctype-but-got-start-tag"``;
    ``datavars`` fills in its message template.
    """

    __slots__ = ("code", "column", "datavars", "line")

    def __init__(self, code, line=None, column=None, datavars=None):
        self.code = code
        self.line = line
        self.column = column
        self.datavars = datavars or {}

    @classmethod
    def from_html5lib(cls, entry):
        (line, column), code, datavars = entry
        return cls(code, line, column, datavars)

    @property
    def message(self):
        template = E.get(self.code)
        if template is None:
            return self.code
        return template % self.datavars

    def __repr__(self):
        return f"ParseError({self.code!r}, line={self.line}, column={self.column})"

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}, column {self.column}: {self.message}"


class StrictModeError(Exception):
    """Raised by strict parsing on the first HTML parse error."""

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error
