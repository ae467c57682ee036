"""cisco_vxlan_vtep exceptions."""

from typing import Optional


class NveVtepError(Exception):
    """Base exception for cisco_vxlan_vtep validation errors."""

    def __init__(self, msg: str, attribute: Optional[str] = None) -> None:
        self.msg = msg
        self.attribute = attribute
        super().__init__(msg)

    def __str__(self) -> str:
        if self.attribute:
            return f"{self.attribute}: {self.msg}"
        return self.msg


class InvalidIdentity(NveVtepError):
    """Title doesn't match the identity pattern."""


class InvalidType(NveVtepError):
    """Raw value isn't of the expected primitive type."""


class InvalidEnumValue(NveVtepError):
    """Value outside of an attribute's enumerated domain."""


class InvalidInteger(NveVtepError):
    """Value can't be parsed as an integer."""


class CrossFieldViolation(NveVtepError):
    """A rule spanning more than one attribute was violated."""


class UnknownAttribute(NveVtepError):
    """Attribute not declared by the resource type."""


class DuplicateResource(NveVtepError):
    """Two catalog entries resolve to the same interface."""
