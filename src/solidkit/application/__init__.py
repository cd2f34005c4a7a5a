"""Application layer - services that consume capability abstractions."""
