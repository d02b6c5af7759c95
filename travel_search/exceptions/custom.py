class ScrapeTransportError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ElementParseError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LLMError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SearchParameterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
