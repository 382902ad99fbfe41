"""Employee Records API package.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
