"""Schemas — Pydantic models for API request/response boundaries.

Invariants:
    - Schemas never import ORM models; they map from core entities
"""
