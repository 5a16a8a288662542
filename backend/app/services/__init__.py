"""Services Layer — imperative shell around the normalization core.

Invariants:
    - Each service function: normalize raw input (core) -> store IO -> format (core)
    - Services raise domain errors; routes never build error responses themselves

Design Decisions:
    - Plain async functions taking an AsyncSession: the session is injected per
      request, so tests swap the store without touching globals
"""
