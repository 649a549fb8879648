"""Application layer: per-run wiring shared by user interfaces."""
