"""JobHub realtime synchronization and interaction fan-out core."""
