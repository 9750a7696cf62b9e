"""Backend proxy for HERE routing, traffic flow and road attribute data."""

__version__ = "1.0.0"
