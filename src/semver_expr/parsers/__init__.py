"""Character-level version grammar."""
