def internal_only(func):
    """Decorator to mark a function as deliberately left out of the public documentation."""
    func.__internal_only__ = True
    return func


internal_only(internal_only)
