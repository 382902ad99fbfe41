"""Services Layer — orchestration between routes and storage.

Invariants:
    - Services raise typed EmployeeApiError subclasses, never HTTPException
"""
