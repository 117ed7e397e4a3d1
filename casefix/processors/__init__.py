"""
Text processing modules for Casefix.

This package contains individual processors that transform the text held
by a CasefixContext. Each processor takes and returns the context, so they
can be combined in any order.
"""
