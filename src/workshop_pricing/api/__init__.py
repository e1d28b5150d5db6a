"""API layer — HTTP access to the cost store and calculator."""
