"""Bookings app package.

The booking engine: the Conflict Checker, the Price Calculator, the
booking ledger with its status state machine and the orchestrator that
ties them together. Reservations are written atomically under a room
row lock so two overlapping stays can never both hold the same room.
"""
