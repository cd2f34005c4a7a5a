"""Domain layer - capability contracts and domain variants."""
