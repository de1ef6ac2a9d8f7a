"""Engine implementations."""
