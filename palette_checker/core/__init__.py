"""palette_checker.core: Foundation layer.

Contains the colour model, colour set, pixel filter, image I/O adapter,
error types and report builder. This module has NO dependencies on
palette_checker.__main__. Only stdlib, numpy, and PIL are allowed here.
"""
