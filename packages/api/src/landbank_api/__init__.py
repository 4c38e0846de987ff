# This project was developed with assistance from AI tools.
"""Land bank compliance API."""

__version__ = "0.1.0"
