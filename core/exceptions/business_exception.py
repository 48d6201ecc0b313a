class BusinessException(Exception):
    """Base exception rendered by the global handler as {"message", "status"}."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)
