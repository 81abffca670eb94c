"""Error taxonomy and engine results.

Engines return a ``Rejection`` for ordinary illegal moves and a
``Transition`` for accepted ones. Only ``InvariantViolation`` is ever raised
from engine code.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


class GameError(Exception):
    status_code = 500
    kind = 'error'

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload = {'success': False, 'error': self.message}
        payload.update(self.details)
        return payload


class ValidationError(GameError):
    """The move breaks a game rule. Safe to show to the acting player."""
    status_code = 400
    kind = 'validation'


class AuthorizationError(GameError):
    """Wrong seat, or the seat does not own the current phase/turn."""
    status_code = 403
    kind = 'authorization'


class NotFoundError(GameError):
    status_code = 404
    kind = 'not_found'


class ConflictError(GameError):
    """The stored game moved on since it was read. Refetch and resubmit."""
    status_code = 409
    kind = 'conflict'


class InvariantViolation(GameError):
    """A state invariant broke. Always a bug; the move must be refused."""
    status_code = 500
    kind = 'invariant'


@dataclass
class Rejection:
    error: GameError

    @property
    def status_code(self) -> int:
        return self.error.status_code

    @property
    def message(self) -> str:
        return self.error.message


@dataclass
class Transition:
    """An accepted move.

    ``move_data`` is what goes into the move log. ``outcome`` is merged into
    the response sent to the acting client. A ``noop`` transition is accepted
    but leaves the stored game untouched and appends nothing.
    """
    state: Any
    move_type: str
    move_data: Dict[str, Any] = field(default_factory=dict)
    outcome: Dict[str, Any] = field(default_factory=dict)
    noop: bool = False


def reject(message: str, **details) -> Rejection:
    return Rejection(ValidationError(message, **details))


def forbid(message: str, **details) -> Rejection:
    return Rejection(AuthorizationError(message, **details))
