"""
Core domain models, mathematical primitives, and invariants.

Pure in-memory computations: no I/O, no global mutable state.
"""
