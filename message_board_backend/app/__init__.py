"""Application layer for the message board backend."""
