"""Investment growth calculator: projection engine and JSON API."""

__version__ = "0.1.0"
