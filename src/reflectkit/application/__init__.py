"""Application layer: discovery, overload resolution, invocation, reporting."""
