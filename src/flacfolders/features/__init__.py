"""Feature slices: metadata resolution and placement."""
