"""Field Errors — paths into a resource and the structured errors attached to them.

Invariants:
    - FieldPath is immutable: child() and index() return new paths
    - A path renders as name segments joined by "." with indexes as "[i]"
    - A path whose only segment is "" (the root) renders as ""
    - FieldError is a frozen value: (type, field, bad_value, detail)
    - An error on the root path renders as its body alone ('Invalid value: "": ...'),
      where Kubernetes would print a bare leading ": "

Design Decisions:
    - Frozen dataclasses over pydantic models: core stays framework-free and hashable
    - String form mirrors Kubernetes field errors so denial messages read the same
      as any other admission webhook in the cluster
"""

import json
from dataclasses import dataclass
from typing import Any

from vpcadmission.core.domain_types import ErrorType


@dataclass(frozen=True)
class FieldPath:
    """Ordered path segments. str segments are field names, int segments indexes."""
    segments: tuple[str | int, ...] = ()

    def child(self, name: str, *more: str) -> "FieldPath":
        return FieldPath(self.segments + (name,) + more)

    def index(self, i: int) -> "FieldPath":
        return FieldPath(self.segments + (i,))

    def __str__(self) -> str:
        out = ""
        for seg in self.segments:
            if isinstance(seg, int):
                out += f"[{seg}]"
            elif out:
                out += f".{seg}"
            else:
                out = seg
        return out


def new_path(name: str, *more: str) -> FieldPath:
    """Start a path at a root field name."""
    return FieldPath((name,) + more)


@dataclass(frozen=True)
class FieldError:
    """One structural violation at one location of the resource."""
    type: ErrorType
    field: str
    detail: str
    bad_value: Any = None

    def error_body(self) -> str:
        """Error text without the field path."""
        body = self.type.label
        if self.type == ErrorType.INVALID:
            body += f": {_render_value(self.bad_value)}"
        if self.detail:
            body += f": {self.detail}"
        return body

    def __str__(self) -> str:
        if not self.field:
            return self.error_body()
        return f"{self.field}: {self.error_body()}"


def required(path: FieldPath, detail: str) -> FieldError:
    """A mandatory value was omitted."""
    return FieldError(ErrorType.REQUIRED, str(path), detail)


def invalid(path: FieldPath, value: Any, detail: str) -> FieldError:
    """A value (or combination of values) is present but semantically wrong."""
    return FieldError(ErrorType.INVALID, str(path), detail, value)


def _render_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)
