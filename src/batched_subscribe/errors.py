class InvalidArgument(TypeError):
    """Raised when a batch function or listener is not callable."""
