"""Field tree node and flat value models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from form_tree.errors import InvalidValueError


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, (bool, int, float)):
        return str(value)
    return value


class FieldNode(BaseModel):
    """One field of the nested tree.

    ``selected`` holds the field's children in order. Identifiers are unique
    among siblings only, so a node is identified by its full path.
    """

    model_config = ConfigDict(populate_by_name=True)

    field_id: str = Field(alias="fieldId")
    content: str = ""
    selected: list["FieldNode"] = Field(default_factory=list)

    def find(self, field_id: str) -> "FieldNode | None":
        """Return the direct child with ``field_id``, or None."""
        return find_sibling(self.selected, field_id)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, ``{"fieldId", "content", "selected"}``."""
        return self.model_dump(by_alias=True)


class FieldValue(BaseModel):
    """Leaf value of one flat entry: free text and/or the chosen option(s)."""

    model_config = ConfigDict(extra="ignore")

    content: str | None = None
    selection: str | list[str] | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("selection", mode="before")
    @classmethod
    def _coerce_selection(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return [_scalar_to_str(item) for item in value]
        return _scalar_to_str(value)

    def to_plain_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def find_sibling(siblings: list[FieldNode], field_id: str) -> FieldNode | None:
    """Linear search of a sibling list by identifier."""
    for node in siblings:
        if node.field_id == field_id:
            return node
    return None


def as_field_value(key: Any, value: Any) -> FieldValue:
    """Validate ``value`` into a FieldValue, reporting failures against ``key``."""
    if isinstance(value, FieldValue):
        return value
    if value is None:
        return FieldValue()
    try:
        return FieldValue.model_validate(value)
    except ValidationError as exc:
        errors = "; ".join(f"{'.'.join(map(str, err['loc'])) or 'value'}: {err['msg']}" for err in exc.errors())
        raise InvalidValueError(key, errors) from exc
