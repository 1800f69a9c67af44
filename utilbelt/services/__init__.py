"""Service layer modules (stream and external I/O).

Currently includes JSON body aggregation and the typed errors it raises.
"""

__all__ = [
    "body",
    "errors",
]
