"""Cats app package.

Customer-owned cats. A cat is never hard-deleted while it may still be
referenced by bookings; deactivating it hides it from new bookings.
"""
