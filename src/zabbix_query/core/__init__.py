"""Core query package.

Filter resolution and sample conversion, free of any transport or storage
code. Everything here is a pure function of its inputs.
"""
