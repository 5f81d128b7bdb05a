#!/usr/bin/env python3
"""Profile htmlpretty to find performance bottlenecks."""

import cProfile
import io
import pstats

from htmlpretty import parse, to_html

# Sample HTML
html = """
<!DOCTYPE html>
<html>
<head><title>Test</title></head>
<body>
    <div class="container">
        <p>Paragraph 1 with <a href="/link">a link</a> and some more text that has to be wrapped eventually.</p>
        <p>Paragraph 2</p>
        <ul><li>One<li>Two <em>emphasized</em></ul>
        <pre>  keep
    this</pre>
    </div>
</body>
</html>
""" * 100  # Repeat for more meaningful results

root = parse(html)

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    _ = to_html(root, "  ", 80)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
