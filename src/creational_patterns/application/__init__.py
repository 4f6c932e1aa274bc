"""Application layer - services running each pattern's client code."""
