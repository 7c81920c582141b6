"""Application layer: realtime projection and interaction use cases."""
