"""Beer Tasting API."""
