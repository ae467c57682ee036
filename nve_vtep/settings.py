"""Settings for the cisco_vxlan_vtep resource type."""

# Name the host engine uses for this resource type
RESOURCE_TYPE = "cisco_vxlan_vtep"

# Title pattern, the first capture group is the interface name
TITLE_PATTERN = r"^(\S+)"

# Keyword that resets a property to the device default
DEFAULT_KEYWORD = "default"

# Value the multicast group properties take when given the default keyword.
# These two properties never used the default sentinel, keep it that way
# until the schema owner decides otherwise.
MCAST_GROUP_DEFAULT = False
