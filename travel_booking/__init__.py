"""Travel booking service: customers, flights, bookings and travel agent bookings."""

__version__ = "1.0.0"
