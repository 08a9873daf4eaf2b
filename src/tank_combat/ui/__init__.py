"""Arena rendering and bar state."""
