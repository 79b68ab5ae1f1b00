"""
Core domain models, mathematical primitives, and contracts.

This module contains the Polynomial value type, the pure coefficient
arithmetic it is built on, and the JSON contract for its serialized form.
"""
