class InvalidConfiguration(ValueError):
    """Raised when a black hole, ray, trail policy or simulation is set up with unusable values."""
