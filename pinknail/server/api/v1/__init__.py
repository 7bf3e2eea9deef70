"""Version 1 of the Pink Nail REST API."""
