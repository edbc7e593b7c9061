"""Mirror Mode voice engine.

Extracts stylistic fingerprints from writing samples and merges them into a
per-user voice profile with a confidence score.
"""

__version__ = "1.0.0"
