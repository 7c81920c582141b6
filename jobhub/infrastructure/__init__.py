"""Infrastructure adapters: persistence, document store and realtime delivery."""
