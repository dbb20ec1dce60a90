"""Run two commands as a pipeline between an input file and an output file, with string, byte and list helpers."""

__version__ = "1.0.0"

__all__ = ["__version__"]