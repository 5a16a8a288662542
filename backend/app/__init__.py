"""Exercise Tracker Application Package — users and their exercise logs.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
