"""HTML5 tag vocabulary used by the pretty-printer.

Each table is a plain frozenset of lowercase tag names. The printer never
special-cases a tag by name; it only asks which of these sets a tag is in,
so tuning the output for a new element is a one-line change here.

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://developer.mozilla.org/en-US/docs/Web/HTML/Inline_elements
"""

# Elements with no content and no closing tag.
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

# Elements laid out inline: no line break is added before or after them and
# their children are not nested. Whitespace in adjacent text is significant.
INLINE_ELEMENTS = frozenset({
    "a", "abbr", "acronym", "amp-img", "b", "big", "cite", "code", "data",
    "def", "del", "dfn", "em", "i", "img", "ins", "kbd", "mark", "picture",
    "q", "s", "small", "source", "span", "strong", "sub", "sup", "svg",
    "time", "tt", "u", "wbr",
})

# Elements whose children go on their own indented lines even when the
# element itself is inline (picture/source/img groups, nested amp-img).
LIST_ELEMENTS = frozenset({
    "amp-img", "ol", "picture", "svg", "ul",
})

# Non-void elements whose closing tag is never written.
OMIT_CLOSE_ELEMENTS = frozenset({
    "li",
})

# Contents are written byte-for-byte: no escaping, no whitespace changes.
LITERAL_ELEMENTS = frozenset({
    "noscript", "script", "style",
})

# Contents are escaped but keep their original whitespace.
KEEP_SPACE_ELEMENTS = frozenset({
    "pre",
})

# https://infra.spec.whatwg.org/#ascii-whitespace
ASCII_WHITESPACE = "\t\n\f\r "
