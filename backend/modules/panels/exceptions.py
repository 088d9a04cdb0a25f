"""
Panel module exceptions.
"""

from shared.exceptions import NotFoundError, ConflictError


class ObjectiveNotFoundError(NotFoundError):
    """Raised when a backing board has no objective with the given name."""

    def __init__(self, name: str):
        super().__init__(
            f"Objective not found: {name}",
            code="OBJECTIVE_NOT_FOUND",
            details={"objective": name},
        )


class ObjectiveAlreadyRegisteredError(ConflictError):
    """Raised when an objective name is registered twice on one board."""

    def __init__(self, name: str):
        super().__init__(
            f"Objective already registered: {name}",
            code="OBJECTIVE_ALREADY_REGISTERED",
            details={"objective": name},
        )


class TeamAlreadyRegisteredError(ConflictError):
    """Raised when a team name is registered twice on one board."""

    def __init__(self, name: str):
        super().__init__(
            f"Team already registered: {name}",
            code="TEAM_ALREADY_REGISTERED",
            details={"team": name},
        )
