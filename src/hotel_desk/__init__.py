"""HotelDesk - hotel front-desk CLI over a parameterized statement builder."""

__version__ = "0.1.0"
