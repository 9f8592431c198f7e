"""rgb24.core — Foundation layer.

Contains the Rgb24 value type, colour-string parsing and serialisation.
This module has NO dependencies on rgb24.sample or rgb24.registry, and never
imports numpy.
"""
