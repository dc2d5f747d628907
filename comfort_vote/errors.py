from typing import Tuple


class VoteError(Exception):
    """Base class for errors raised by the vote store."""


class InvalidCategory(VoteError):
    """
    The submitted label is not one of the configured categories.
    Raised before any state is touched.
    """

    def __init__(self, category: str, allowed: Tuple[str, ...]):
        self.category = category
        self.allowed = allowed
        super().__init__(f"Invalid vote option: {category}")
