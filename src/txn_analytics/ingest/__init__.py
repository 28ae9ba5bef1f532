"""Loading helpers that turn JSON files into validated transaction records."""
