"""Domain layer - the participants of each creational pattern."""
