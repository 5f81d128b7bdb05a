"""
Build hook for htmlpretty. Metadata lives in pyproject.toml.

    # Compile the printer with mypyc (needs the "mypyc" extra)
    HTMLPRETTY_USE_MYPYC=1 pip install .
"""

import os

from setuptools import setup

# The per-token code paths; node.py and treebuilder.py run once per document.
MYPYC_MODULES = [
    "src/htmlpretty/serialize.py",
    "src/htmlpretty/writer.py",
    "src/htmlpretty/text.py",
]

ext_modules = []
if os.environ.get("HTMLPRETTY_USE_MYPYC", "0") == "1":
    from mypyc.build import mypycify

    ext_modules = mypycify(MYPYC_MODULES, opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"))

setup(ext_modules=ext_modules)
