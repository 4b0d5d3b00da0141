"""FastAPI application for the booking platform."""
