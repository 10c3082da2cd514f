class UniqueConstraintViolation(Exception):
    """Raised by a repository when the store rejects a duplicate row."""
