"""Exceptions raised by the query core."""


class InvalidFilterSyntax(ValueError):
    """Raised when a filter pattern cannot be compiled.

    Attributes:
        filter_text: The filter string as supplied by the caller.
    """

    def __init__(self, filter_text: str, reason: str) -> None:
        super().__init__(f"invalid filter {filter_text!r}: {reason}")
        self.filter_text = filter_text
        self.reason = reason
