"""Domain layer for HotelDesk."""
