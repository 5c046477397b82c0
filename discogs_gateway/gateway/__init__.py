"""Tool registry and HTTP invocation gateway."""
