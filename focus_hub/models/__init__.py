"""Pydantic models shared by the API and repositories."""
