"""Version 1 of the Coffee Shop API.  Exposes ``router``."""
