"""cisco_vxlan_vtep resource type.

Manage the VXLAN VTEP NVE interface schema
"""
import logging

log = logging.getLogger("nve_vtep")
log.addHandler(logging.NullHandler())
