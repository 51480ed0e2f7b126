"""FastAPI server adapter for bindshift."""
