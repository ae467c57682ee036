"""VtepController."""

# pylint: disable=invalid-name
import re
from typing import Any, Mapping, Optional

from nve_vtep import log, settings
from nve_vtep.exceptions import (DuplicateResource, InvalidIdentity,
                                 InvalidType, NveVtepError)
from nve_vtep.models import VxlanVtepDoc, normalize, validate_rules

DEFAULT_RESOURCE_TYPE = "cisco_vxlan_vtep"
DEFAULT_TITLE_PATTERN = r"^(\S+)"


class VtepController:
    """VtepController.

    Turns catalog entries into validated VxlanVtepDoc instances in three
    stages: parse the identity out of the title, normalize each attribute
    and check the rules spanning more than one attribute.
    """

    def __init__(self, title_pattern: Optional[str] = None) -> None:
        """Constructor of VtepController."""
        self.resource_type = getattr(settings, "RESOURCE_TYPE",
                                     DEFAULT_RESOURCE_TYPE)
        self.title_pattern = re.compile(
            title_pattern
            or getattr(settings, "TITLE_PATTERN", DEFAULT_TITLE_PATTERN)
        )

    def parse_identity(self, title: Any) -> str:
        """Get the interface name out of a resource title."""
        if not isinstance(title, str):
            raise InvalidType("Title must be a string", "interface")
        match = self.title_pattern.match(title)
        if not title or not match:
            raise InvalidIdentity(f"Invalid title {title!r}", "interface")
        return match.group(1)

    @staticmethod
    def normalize_field(attribute: str, value: Any) -> Any:
        """Normalize a single raw attribute value."""
        return normalize(attribute, value)

    @staticmethod
    def validate_resource(resource: VxlanVtepDoc) -> None:
        """Check the rules spanning more than one attribute.

        Building a VxlanVtepDoc already runs them, this is for instances
        changed afterwards, e.g. through model_copy(update=...).
        """
        validate_rules(resource)

    def build(self, title: Any,
              attributes: Optional[Mapping[str, Any]] = None) -> VxlanVtepDoc:
        """Build a validated resource out of a catalog entry.

        An explicit interface attribute takes precedence over the title.
        """
        ref = f"{self.resource_type}[{title}]"
        try:
            if attributes is None:
                attributes = {}
            if not isinstance(attributes, Mapping):
                raise InvalidType(
                    f"Attributes must be a mapping, got {attributes!r}"
                )
            attributes = dict(attributes)
            if attributes.get("interface") is None:
                attributes["interface"] = self.parse_identity(title)
            resource = VxlanVtepDoc(**attributes)
        except NveVtepError as err:
            log.error(f"Invalid resource {ref}: {err}")
            raise
        log.info(f"Validated {ref}")
        return resource

    def add_resource(self, resources: dict[str, VxlanVtepDoc], title: Any,
                     resource: VxlanVtepDoc) -> None:
        """Add a built resource, rejecting an interface declared twice."""
        if resource.interface in resources:
            raise DuplicateResource(
                f"Duplicate declaration {self.resource_type}"
                f"[{resource.interface}] from title {title!r}",
                "interface",
            )
        resources[resource.interface] = resource

    def build_catalog(
        self, catalog: Mapping[Any, Optional[Mapping[str, Any]]]
    ) -> dict[str, VxlanVtepDoc]:
        """Build every entry of a catalog, keyed by interface name.

        Stops at the first invalid entry.
        """
        if not isinstance(catalog, Mapping):
            raise InvalidType(f"Catalog must be a mapping, got {catalog!r}")
        resources: dict[str, VxlanVtepDoc] = {}
        for title, attributes in catalog.items():
            self.add_resource(resources, title,
                              self.build(title, attributes))
        log.debug(f"Built {len(resources)} {self.resource_type} resources")
        return resources
