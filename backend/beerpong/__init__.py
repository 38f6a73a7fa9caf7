"""Beerpong Application Package — throw recording and cup authorization service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
