"""
Command-line tools for fieldrules.
"""
