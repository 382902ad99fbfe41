"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Wire names are camelCase (firstName); snake_case accepted on input
    - Schemas are API contracts, models/ is persistence
"""
