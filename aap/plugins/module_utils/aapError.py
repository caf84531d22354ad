class ResourceError(Exception):
    """
    Raised when the AAP API answers a resource operation with an
    unexpected status.

    Attributes:
        errors -- a list of error messages
        message -- summary of the failed operation
        status -- the HTTP status returned, if any
        body -- the raw response body, if any
    """

    def __init__(self, errors: list, message: str, status: int = None, body: str = None):
        self.errors = errors
        self.message = message
        self.status = status
        self.body = body
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return "%s: %s" % (self.message, "; ".join(str(e) for e in self.errors))
