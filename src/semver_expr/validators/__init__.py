"""Schema validation for serialized documents."""
