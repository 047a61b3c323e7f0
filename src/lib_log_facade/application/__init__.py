"""Application layer: ports shared by the facade and adapters."""
