"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure imports only core/errors.py from the core (for error mapping)
    - Every SQLAlchemy failure leaves this layer as a StoreError
"""
