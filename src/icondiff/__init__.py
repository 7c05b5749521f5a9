"""icondiff - Regression diffs for variable icon fonts.

icondiff compares two builds of the same variable icon font. It samples the
design space of every variation axis, renders every icon common to both builds
at every sampled location and reports the icons whose renderings differ.

Example:
    $ icondiff MaterialSymbolsOutlined-old.ttf MaterialSymbolsOutlined-new.ttf

The exit status is 0 when both builds render identically and 1 otherwise.
Failing renderings are written to the temp directory for offline diffing.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
