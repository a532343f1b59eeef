"""Pydantic schemas shared by the gateway."""
