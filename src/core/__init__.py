"""
Core arithmetic primitives and payload contracts.

This module contains the foundational building blocks: the arbitrary-precision
integer and rational value types and their serialized contracts.
"""
