"""Domain layer: catalog model, invocation targets and exceptions."""
