"""Finances app package.

Payments for bookings. Recording a payment whose amount matches the
booking total is what confirms a pending booking.
"""
