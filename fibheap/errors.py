class InvalidKeyError(ValueError):
    """Raised when a key change moves a node in the wrong direction."""
    pass
