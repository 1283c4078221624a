"""
Operation result types.

Every catalog operation returns either a ``Success`` carrying a plain,
serializable snapshot or a ``Failure`` carrying an error kind, a message
and, for validation failures only, the field-level errors. The two are
separate types so a successful result can never hold errors.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Union


class ErrorKind(str, Enum):
    """Kinds of failure an operation can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    DUPLICATE_NAME = "duplicate_name"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation message."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Success:
    """Successful outcome with its data."""

    data: Any = None
    success: ClassVar[bool] = True

    def to_dict(self) -> Dict[str, Any]:
        """Render the response envelope."""
        return {"success": True, "data": self.data}


@dataclass(frozen=True)
class Failure:
    """Failed outcome with a kind and message."""

    kind: ErrorKind
    error: str
    errors: Tuple[FieldError, ...] = field(default_factory=tuple)
    success: ClassVar[bool] = False

    def __post_init__(self):
        """Freeze field errors and keep them on validation failures only."""
        object.__setattr__(self, "errors", tuple(self.errors))
        if self.errors and self.kind is not ErrorKind.VALIDATION:
            raise ValueError("Field errors are only allowed on validation failures")

    def to_dict(self) -> Dict[str, Any]:
        """Render the response envelope."""
        envelope: Dict[str, Any] = {"success": False, "error": self.error}
        if self.kind is ErrorKind.VALIDATION:
            envelope["errors"] = [error.to_dict() for error in self.errors]
        return envelope


Result = Union[Success, Failure]
