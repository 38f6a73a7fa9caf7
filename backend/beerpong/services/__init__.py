"""Services Layer — orchestrates core rules around cache and policy IO.

Invariants:
    - Services receive collaborators through their constructor
    - Failures raised as BeerPongError subclasses; routes never build error bodies

Design Decisions:
    - One service per endpoint for locality
"""
