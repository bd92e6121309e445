"""
Core Utilities - Configuration, Logging, Time and Frame Helpers

Shared building blocks with no dependency on the transformation layer,
except for the frame helpers which reuse its collection functions.
"""
