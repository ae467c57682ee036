"""Validate a JSON catalog of cisco_vxlan_vtep resources.

The catalog maps resource titles to their attributes:

    {"nve1": {"source_interface": "loopback1", "shutdown": false}}

Usage: python scripts/validate_catalog.py <catalog.json>

Set NVE_VTEP_LOG_LEVEL (e.g. DEBUG) to see every normalized attribute.
"""
import json
import logging
import os
import sys

from nve_vtep.controllers import VtepController
from nve_vtep.exceptions import NveVtepError


def validate_catalog(path: str) -> int:
    """Validate every entry, return how many are invalid."""
    with open(path, encoding="utf-8") as file:
        catalog = json.load(file)

    if not isinstance(catalog, dict):
        print(f"Error: {path}: the catalog must be a JSON object")
        return 1

    controller = VtepController()
    resources = {}
    failed = 0
    for title, attributes in catalog.items():
        try:
            resource = controller.build(title, attributes)
            controller.add_resource(resources, title, resource)
        except NveVtepError as err:
            print(f"Error: {controller.resource_type}[{title}]: {err}")
            failed += 1
            continue
        print(f"{controller.resource_type}[{title}]: "
              f"{json.dumps(resource.as_dict(), sort_keys=True)}")
    return failed


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <catalog.json>")
        sys.exit(2)
    logging.basicConfig(level=os.environ.get("NVE_VTEP_LOG_LEVEL", "WARNING"))
    if validate_catalog(sys.argv[1]):
        sys.exit(1)
