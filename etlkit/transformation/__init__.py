"""
Transformation Layer - Pure, Deterministic Functions

This layer contains the collection and dictionary helpers.
- Pure functions (input → output), or in-place updates of the caller's dict
- No I/O operations
- Unit testable
- Deterministic results
"""
