"""cisco_vxlan_vtep models."""
# pylint: disable=unused-argument,no-self-argument,invalid-name,
# pylint: disable=no-name-in-module

import re
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from pydantic import (BaseModel, ConfigDict, Field, ValidationInfo,
                      field_validator, model_validator)

from nve_vtep import log, settings
from nve_vtep.exceptions import (CrossFieldViolation, InvalidEnumValue,
                                 InvalidInteger, InvalidType,
                                 UnknownAttribute)


class Default(Enum):
    """Marker to reset a property to the device default."""

    DEFAULT = "default"


class Ensure(Enum):
    """Whether the NVE interface should exist."""

    PRESENT = "present"
    ABSENT = "absent"


class HostReachability(Enum):
    """Host reachability advertisement mechanism."""

    EVPN = "evpn"
    FLOOD = "flood"
    DEFAULT = "default"


class TriState(Enum):
    """Boolean property that can also be reset to the device default."""

    TRUE = "true"
    FALSE = "false"
    DEFAULT = "default"


# Octal literal, a leading 0 followed by more digits
OCTAL_PATTERN = re.compile(r"[+-]?0[0-7_]+")


def _is_default(value: Any) -> bool:
    return value is Default.DEFAULT or value == settings.DEFAULT_KEYWORD


def munge_identity(attribute: str, value: Any) -> str:
    """Lower-case the interface name."""
    if not isinstance(value, str):
        raise InvalidType("Interface name must be a string", attribute)
    return value.lower()


def _check_raw_type(attribute: str, value: Any) -> Any:
    """Catalog values are strings, booleans or integers."""
    if not isinstance(value, (str, bool, int)):
        raise InvalidType(
            f"Invalid value {value!r}, expected a string, boolean or integer",
            attribute,
        )
    return value


def munge_value(attribute: str,
                value: Any) -> Union[str, bool, int, Default]:
    """Pass a value through, mapping the default keyword to Default."""
    if _is_default(value):
        return Default.DEFAULT
    return _check_raw_type(attribute, value)


def munge_interface_name(attribute: str,
                         value: Any) -> Union[str, Default]:
    """Strip all whitespace and lower-case an interface name."""
    if _is_default(value):
        return Default.DEFAULT
    if not isinstance(value, str):
        raise InvalidType(f"Invalid value {value!r}, expected a string",
                          attribute)
    return "".join(value.split()).lower()


def _parse_integer(value: Any) -> int:
    """Parse integer literals: 0x, 0b and 0o prefixes, leading 0 is octal."""
    if isinstance(value, str):
        text = value.strip()
        if OCTAL_PATTERN.fullmatch(text):
            return int(text, 8)
        return int(text, 0)
    return int(value)


def munge_integer(attribute: str, value: Any) -> Union[int, Default]:
    """Parse an integer, mapping the default keyword to Default."""
    if _is_default(value):
        return Default.DEFAULT
    if isinstance(value, bool):
        raise InvalidInteger(f"{attribute} must be an integer.", attribute)
    try:
        return _parse_integer(value)
    except (TypeError, ValueError) as err:
        raise InvalidInteger(f"{attribute} must be an integer.",
                             attribute) from err


def munge_mcast_group(attribute: str,
                      value: Any) -> Union[str, bool, int]:
    """Pass a multicast group through, the default keyword becomes False."""
    if _is_default(value):
        return settings.MCAST_GROUP_DEFAULT
    return _check_raw_type(attribute, value)


def munge_enum(enum_cls: Type[Enum]) -> Callable[[str, Any], Enum]:
    """Build a munge function accepting only the members of enum_cls.

    Booleans are accepted as their lower-cased names so that ``true`` and
    ``"true"`` resolve to the same member.
    """

    def munge(attribute: str, value: Any) -> Enum:
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, bool):
            value = str(value).lower()
        try:
            return enum_cls(value)
        except ValueError as err:
            allowed = ", ".join(member.value for member in enum_cls)
            raise InvalidEnumValue(
                f"Invalid value {value!r}. Valid values are {allowed}",
                attribute,
            ) from err

    return munge


MUNGERS: Dict[str, Callable[[str, Any], Any]] = {
    "interface": munge_identity,
    "ensure": munge_enum(Ensure),
    "description": munge_value,
    "host_reachability": munge_enum(HostReachability),
    "shutdown": munge_enum(TriState),
    "source_interface": munge_interface_name,
    "multisite_border_gateway_interface": munge_interface_name,
    "source_interface_hold_down_time": munge_integer,
    "global_ingress_replication_bgp": munge_enum(TriState),
    "global_suppress_arp": munge_enum(TriState),
    "global_mcast_group_l2": munge_mcast_group,
    "global_mcast_group_l3": munge_mcast_group,
}


def normalize(attribute: str, value: Any) -> Any:
    """Normalize a raw attribute value. None means unset."""
    try:
        munge = MUNGERS[attribute]
    except KeyError:
        raise UnknownAttribute(f"Invalid attribute {attribute!r}",
                               attribute) from None
    if value is None:
        return None
    return munge(attribute, value)


def hold_down_requires_source_interface(doc: "VxlanVtepDoc") -> Optional[str]:
    """source_interface_hold_down_time needs source_interface."""
    if (doc.source_interface_hold_down_time is not None
            and doc.source_interface is None):
        return ("source_interface_hold_down_time can be used only when "
                "source_interface is also used")
    return None


def ingress_replication_excludes_mcast_l2(
    doc: "VxlanVtepDoc"
) -> Optional[str]:
    """BGP ingress replication and an L2 multicast group are exclusive."""
    if (doc.global_ingress_replication_bgp is TriState.TRUE
            and doc.global_mcast_group_l2 is not None
            and doc.global_mcast_group_l2 is not False):
        return ("Only one of global_ingress_replication_bgp or "
                "global_mcast_group_l2 can be configured not both")
    return None


# Evaluated in order, the first violation wins
RULES: Tuple[Callable[["VxlanVtepDoc"], Optional[str]], ...] = (
    hold_down_requires_source_interface,
    ingress_replication_excludes_mcast_l2,
)


def validate_rules(doc: "VxlanVtepDoc") -> None:
    """Raise CrossFieldViolation for the first violated rule."""
    for rule in RULES:
        msg = rule(doc)
        if msg:
            raise CrossFieldViolation(msg, rule.__name__)


class VxlanVtepDoc(BaseModel):
    """VXLAN VTEP NVE interface Model.

    Example of a catalog entry::

        cisco_vxlan_vtep { 'nve1':
          ensure                          => present,
          description                     => 'nve interface',
          host_reachability               => 'evpn',
          shutdown                        => false,
          source_interface                => 'loopback1',
          source_interface_hold_down_time => '50',
          global_ingress_replication_bgp  => 'true',
          global_mcast_group_l3           => '225.1.1.2',
          global_suppress_arp             => 'true',
        }
    """

    model_config = ConfigDict(extra="forbid")

    interface: str = Field(
        description="Name of the nve interface on the network element."
    )
    ensure: Ensure = Field(
        Ensure.PRESENT,
        description="Whether the nve interface should be present or absent."
    )
    description: Optional[Union[Default, str, bool, int]] = Field(
        None, description="Description of the NVE interface."
    )
    host_reachability: Optional[HostReachability] = Field(
        None, description="Mechanism for host reachability advertisement."
    )
    shutdown: Optional[TriState] = Field(
        None, description="Administratively shutdown the NVE interface."
    )
    source_interface: Optional[Union[Default, str]] = Field(
        None,
        description="Loopback interface whose IP address should be set as "
                    "the IP address for the NVE interface."
    )
    multisite_border_gateway_interface: Optional[Union[Default, str]] = Field(
        None,
        description="Loopback interface to be used as VxLAN Multisite "
                    "Border-gateway interface."
    )
    source_interface_hold_down_time: Optional[Union[Default, int]] = Field(
        None,
        description="Suppress advertisement of the NVE loopback address "
                    "until the overlay has converged."
    )
    global_ingress_replication_bgp: Optional[TriState] = Field(
        None, description="Sets ingress replication protocol to bgp."
    )
    global_suppress_arp: Optional[TriState] = Field(
        None, description="Enable ARP suppression."
    )
    global_mcast_group_l2: Optional[Union[str, bool, int]] = Field(
        None, description="NVE Multicast Group for L2 VNIs."
    )
    global_mcast_group_l3: Optional[Union[str, bool, int]] = Field(
        None, description="NVE Multicast Group for L3 VNIs."
    )

    @model_validator(mode="before")
    @classmethod
    def check_attributes(cls, data: Any) -> Any:
        """Reject attributes not declared by the resource type."""
        if isinstance(data, dict):
            for attribute in data:
                if attribute not in cls.model_fields:
                    raise UnknownAttribute(
                        f"Invalid attribute {attribute!r}", attribute
                    )
        return data

    @field_validator("*", mode="before")
    def munge(cls, v, info: ValidationInfo) -> Any:
        """Normalize raw values."""
        value = normalize(info.field_name, v)
        log.debug(f"Normalized {info.field_name}: {v!r} -> {value!r}")
        return value

    @model_validator(mode="after")
    def check_rules(self) -> "VxlanVtepDoc":
        """Check rules spanning more than one attribute."""
        validate_rules(self)
        return self

    @classmethod
    def properties(cls) -> list[str]:
        """Names of the managed properties, the identity excluded."""
        return [name for name in cls.model_fields if name != "interface"]

    def as_dict(self) -> dict:
        """Set attributes, sentinels rendered as their keywords."""
        return self.model_dump(mode="json", exclude_none=True)
