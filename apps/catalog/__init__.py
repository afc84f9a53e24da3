"""Catalog app package.

Reference data for the cat hotel: rooms, care services and food items
with their current prices. The booking engine only reads the catalog;
prices change exclusively through admin actions and never affect
bookings that were already priced.
"""
