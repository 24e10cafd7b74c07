class StoreError(Exception):
    """
    Raised when the backing store reports a failure.

    The message keeps the underlying store error text so callers can
    surface it; an empty result is never reported through this error.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation}: {message}")
