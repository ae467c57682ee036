"""Module to test VtepController."""

from unittest import TestCase
from unittest.mock import patch

from nve_vtep.controllers import VtepController
from nve_vtep.exceptions import (CrossFieldViolation, DuplicateResource,
                                 InvalidEnumValue, InvalidIdentity,
                                 InvalidInteger, InvalidType,
                                 UnknownAttribute)
from nve_vtep.models import Default, TriState, VxlanVtepDoc
from tests.unit.helpers import get_catalog_entry


class TestVtepController(TestCase):
    """Test the VtepController class."""

    def setUp(self) -> None:
        """Execute steps before each tests."""
        self.vtep = VtepController()
        self.title = "nve1"

    def test_parse_identity(self) -> None:
        """test_parse_identity."""
        assert self.vtep.parse_identity("nve1") == "nve1"
        assert self.vtep.parse_identity("NVE1") == "NVE1"
        assert self.vtep.parse_identity("nve1 overlay") == "nve1"

    def test_parse_identity_invalid(self) -> None:
        """test_parse_identity_invalid."""
        for title in ("", " nve1"):
            with self.assertRaises(InvalidIdentity):
                self.vtep.parse_identity(title)
        with self.assertRaises(InvalidType):
            self.vtep.parse_identity(None)

    def test_parse_identity_custom_pattern(self) -> None:
        """test_parse_identity_custom_pattern."""
        vtep = VtepController(title_pattern=r"^(nve\d+)$")
        assert vtep.parse_identity("nve10") == "nve10"
        with self.assertRaises(InvalidIdentity):
            vtep.parse_identity("loopback0")

    @patch("nve_vtep.controllers.settings")
    def test_settings(self, mock_settings) -> None:
        """test_settings."""
        mock_settings.RESOURCE_TYPE = "nve_interface"
        mock_settings.TITLE_PATTERN = r"^nve(\d+)"
        vtep = VtepController()
        assert vtep.resource_type == "nve_interface"
        assert vtep.parse_identity("nve7") == "7"

    def test_normalize_field(self) -> None:
        """test_normalize_field."""
        normalize = self.vtep.normalize_field
        assert normalize("interface", "NVE1") == "nve1"
        assert normalize("shutdown", "default") is TriState.DEFAULT
        assert normalize("source_interface_hold_down_time", "50") == 50
        assert normalize("global_mcast_group_l2", "default") is False
        with self.assertRaises(InvalidEnumValue):
            normalize("global_suppress_arp", "enable")
        with self.assertRaises(InvalidInteger):
            normalize("source_interface_hold_down_time", "abc")

    def test_validate_resource(self) -> None:
        """test_validate_resource."""
        resource = self.vtep.build(self.title, get_catalog_entry())
        self.vtep.validate_resource(resource)

        updated = resource.model_copy(
            update={"global_mcast_group_l2": "225.1.1.1"}
        )
        with self.assertRaises(CrossFieldViolation):
            self.vtep.validate_resource(updated)

    @patch("nve_vtep.controllers.log")
    def test_build(self, mock_log) -> None:
        """test_build."""
        resource = self.vtep.build("NVE1", get_catalog_entry())
        assert isinstance(resource, VxlanVtepDoc)
        assert resource.interface == "nve1"
        assert resource.source_interface_hold_down_time == 50
        mock_log.info.assert_called_with(
            "Validated cisco_vxlan_vtep[NVE1]"
        )

    def test_build_without_attributes(self) -> None:
        """test_build_without_attributes."""
        resource = self.vtep.build(self.title)
        assert resource.interface == "nve1"
        assert resource.as_dict() == {"interface": "nve1",
                                      "ensure": "present"}

    def test_build_explicit_interface(self) -> None:
        """test_build_explicit_interface."""
        resource = self.vtep.build("vtep for leaf1", {"interface": "Nve2"})
        assert resource.interface == "nve2"

    @patch("nve_vtep.controllers.log")
    def test_build_invalid(self, mock_log) -> None:
        """test_build_invalid."""
        attributes = get_catalog_entry(source_interface=None)
        with self.assertRaises(CrossFieldViolation):
            self.vtep.build(self.title, attributes)
        assert mock_log.error.call_count == 1
        mock_log.info.assert_not_called()

    @patch("nve_vtep.controllers.log")
    def test_build_invalid_title(self, mock_log) -> None:
        """test_build_invalid_title."""
        with self.assertRaises(InvalidIdentity):
            self.vtep.build("", get_catalog_entry())
        assert mock_log.error.call_count == 1

    def test_build_unknown_attribute(self) -> None:
        """test_build_unknown_attribute."""
        with self.assertRaises(UnknownAttribute):
            self.vtep.build(self.title, {"vni": 10000})

    def test_build_catalog(self) -> None:
        """test_build_catalog."""
        catalog = {
            "nve1": get_catalog_entry(),
            "nve2": {"source_interface": "default",
                     "source_interface_hold_down_time": "default"},
        }
        resources = self.vtep.build_catalog(catalog)
        assert list(resources) == ["nve1", "nve2"]
        nve2 = resources["nve2"]
        assert nve2.source_interface_hold_down_time is Default.DEFAULT

    def test_build_catalog_duplicate(self) -> None:
        """test_build_catalog_duplicate."""
        catalog = {"nve1": None, "NVE1": {"shutdown": True}}
        with self.assertRaises(DuplicateResource) as exc:
            self.vtep.build_catalog(catalog)
        assert "cisco_vxlan_vtep[nve1]" in str(exc.exception)

    def test_build_catalog_stops_at_first_error(self) -> None:
        """test_build_catalog_stops_at_first_error."""
        catalog = {
            "nve1": {"host_reachability": "bgp"},
            "nve2": {"source_interface_hold_down_time": "50"},
        }
        with self.assertRaises(InvalidEnumValue):
            self.vtep.build_catalog(catalog)

    @patch("nve_vtep.controllers.log")
    def test_build_attributes_not_a_mapping(self, mock_log) -> None:
        """test_build_attributes_not_a_mapping."""
        with self.assertRaises(InvalidType) as exc:
            self.vtep.build(self.title, ["shutdown"])
        assert "Attributes must be a mapping" in str(exc.exception)
        assert mock_log.error.call_count == 1

    def test_build_catalog_not_a_mapping(self) -> None:
        """test_build_catalog_not_a_mapping."""
        with self.assertRaises(InvalidType):
            self.vtep.build_catalog([{"nve1": {}}])

    def test_add_resource(self) -> None:
        """test_add_resource."""
        resources = {}
        self.vtep.add_resource(resources, "nve1", self.vtep.build("nve1"))
        assert list(resources) == ["nve1"]
        with self.assertRaises(DuplicateResource):
            self.vtep.add_resource(resources, "NVE1",
                                   self.vtep.build("NVE1"))
