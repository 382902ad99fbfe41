"""Infrastructure Layer — database access, repositories, and logging setup.

Invariants:
    - SQLAlchemy exceptions never escape this layer unconverted
"""
