"""Domain errors raised by the menu core."""
from typing import Optional


class DataError(ValueError):
    """A recipe violates a structural invariant the core depends on.

    Fatal only for the offending recipe: the engine drops it from selection
    and reports it as a diagnostic instead of aborting the request.
    """

    def __init__(self, message: str, recipe_id: Optional[str] = None):
        super().__init__(message)
        self.recipe_id = recipe_id

    def __str__(self) -> str:
        msg = super().__str__()
        if self.recipe_id:
            return f"[{self.recipe_id}] {msg}"
        return msg


__all__ = ["DataError"]
