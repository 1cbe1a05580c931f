"""Schemas — Pydantic models for the editor boundary."""
