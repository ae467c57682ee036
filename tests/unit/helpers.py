"""Module to help to create tests."""


def get_catalog_entry(**overrides) -> dict:
    """Return the attributes of a valid nve1 catalog entry.

    Attributes given as None are dropped from the entry.
    """
    attributes = {
        "description": "nve interface",
        "host_reachability": "evpn",
        "shutdown": False,
        "source_interface": "loopback1",
        "source_interface_hold_down_time": "50",
        "global_ingress_replication_bgp": "true",
        "global_suppress_arp": "true",
    }
    attributes.update(overrides)
    return {key: value for key, value in attributes.items()
            if value is not None}
