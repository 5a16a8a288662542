"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All /api endpoints return JSON; errors use the {"error": <message>} envelope

Design Decisions:
    - Thin routes delegate to services
"""
