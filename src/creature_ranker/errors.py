from __future__ import annotations


class CreatureRankerError(Exception):
    """Base class for every failure a ranking run can report."""


class FetchFailure(CreatureRankerError):
    """The creature source did not answer with a successful response."""

    def __init__(self, reason: str, status_code: int | None = None):
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Error when trying to fetch creatures ::: {reason}")


class PayloadShapeFailure(CreatureRankerError):
    """The decoded payload is not a list of creature records."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = "Error when trying to parse through data."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)


class EmptySubsetFailure(CreatureRankerError):
    """A derivation that needs at least one member got an empty subset."""

    def __init__(self, subset: str):
        self.subset = subset
        super().__init__(f"No {subset} creatures in the current list.")
