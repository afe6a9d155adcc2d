"""Feature modules (one blueprint each, plus the pure card parsing core)."""
