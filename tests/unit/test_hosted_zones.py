"""Test domain_manager.hosted_zones."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from domain_manager.config.models import DomainConfig
from domain_manager.exceptions import HostedZoneListingError, HostedZoneNotFoundError
from domain_manager.hosted_zones import (
    HostedZoneResolver,
    parse_zone_id,
    select_hosted_zone,
    zone_matches,
)

if TYPE_CHECKING:
    from .factories import MockDomainManagerContext

AWS_REGION = "us-west-2"


def zone(name: str, zone_id: str, *, private: bool = False) -> dict[str, Any]:
    """Build a hosted zone."""
    return {
        "CallerReference": zone_id,
        "Config": {"PrivateZone": private},
        "Id": f"/hostedzone/{zone_id}",
        "Name": name,
    }


def list_response(zones: list[dict[str, Any]], **kwargs: Any) -> dict[str, Any]:
    """Build a ListHostedZones response."""
    return {"HostedZones": zones, "IsTruncated": False, "Marker": "", "MaxItems": "100", **kwargs}


@pytest.mark.parametrize(
    ("full_zone_id", "expected"),
    [("/hostedzone/Z1234567890", "Z1234567890"), ("hostedzone/ZABC", "ZABC")],
)
def test_parse_zone_id(full_zone_id: str, expected: str) -> None:
    """Test parse_zone_id."""
    assert parse_zone_id(full_zone_id) == expected


@pytest.mark.parametrize(
    ("zone_name", "domain_name", "expected"),
    [
        ("example.com.", "foo.example.com", True),
        ("example.com", "foo.example.com", True),
        ("example.com.", "example.com", True),
        ("ample.com.", "foo.example.com", False),
        ("foo.example.com.", "example.com", False),
        ("other.com.", "foo.example.com", False),
        ("example.com.", "localhost", True),
    ],
)
def test_zone_matches(zone_name: str, domain_name: str, expected: bool) -> None:
    """Test zone_matches."""
    assert zone_matches(zone_name, domain_name) is expected


class TestSelectHostedZone:
    """Test select_hosted_zone."""

    def test_most_specific(self) -> None:
        """Test the longest zone name wins."""
        zones: Any = [zone("example.com.", "ZPARENT"), zone("api.example.com.", "ZCHILD")]
        result = select_hosted_zone(zones, "foo.api.example.com")
        assert result
        assert result["Id"] == "/hostedzone/ZCHILD"

    def test_no_match(self) -> None:
        """Test nothing matches."""
        assert not select_hosted_zone([zone("ample.com.", "Z1")], "foo.example.com")  # type: ignore

    @pytest.mark.parametrize(("private", "expected"), [(True, "ZPRIVATE"), (False, "ZPUBLIC")])
    def test_privacy_filter(self, private: bool, expected: str) -> None:
        """Test zones are filtered on privacy."""
        zones: Any = [
            zone("example.com.", "ZPUBLIC"),
            zone("example.com.", "ZPRIVATE", private=True),
        ]
        result = select_hosted_zone(zones, "api.example.com", private=private)
        assert result
        assert result["Id"] == f"/hostedzone/{expected}"

    def test_tie_keeps_list_order(self) -> None:
        """Test zones of equal name length keep list order."""
        zones: Any = [
            zone("example.com.", "ZFIRST"),
            zone("example.com.", "ZSECOND", private=True),
        ]
        result = select_hosted_zone(zones, "api.example.com")
        assert result
        assert result["Id"] == "/hostedzone/ZFIRST"


class TestHostedZoneResolver:
    """Test HostedZoneResolver."""

    def test_resolve(self, domain_manager_context: MockDomainManagerContext) -> None:
        """Test resolve."""
        stubber = domain_manager_context.add_stubber("route53")
        stubber.add_response(
            "list_hosted_zones",
            list_response(
                [zone("example.com.", "ZPARENT")], IsTruncated=True, NextMarker="page2"
            ),
            {},
        )
        stubber.add_response(
            "list_hosted_zones",
            list_response([zone("api.example.com.", "ZCHILD")], Marker="page2"),
            {"Marker": "page2"},
        )
        with stubber:
            assert (
                HostedZoneResolver(domain_manager_context).resolve(
                    DomainConfig.model_validate({"domainName": "api.example.com"})
                )
                == "ZCHILD"
            )
        stubber.assert_no_pending_responses()

    def test_resolve_hosted_zone_id(
        self, domain_manager_context: MockDomainManagerContext
    ) -> None:
        """Test resolve with an explicit hosted zone id makes no remote call."""
        stubber = domain_manager_context.add_stubber("route53")
        with stubber:
            assert (
                HostedZoneResolver(domain_manager_context).resolve(
                    DomainConfig.model_validate(
                        {"domainName": "api.example.com", "hostedZoneId": "ZEXPLICIT"}
                    )
                )
                == "ZEXPLICIT"
            )

    def test_resolve_listing_error(
        self, domain_manager_context: MockDomainManagerContext
    ) -> None:
        """Test resolve when zones can not be listed."""
        stubber = domain_manager_context.add_stubber("route53")
        stubber.add_client_error("list_hosted_zones", service_error_code="AccessDenied")
        with stubber, pytest.raises(HostedZoneListingError) as excinfo:
            HostedZoneResolver(domain_manager_context).resolve(
                DomainConfig.model_validate({"domainName": "api.example.com"})
            )
        assert excinfo.value.domain_name == "api.example.com"

    def test_resolve_not_found(self, domain_manager_context: MockDomainManagerContext) -> None:
        """Test resolve when nothing matches."""
        stubber = domain_manager_context.add_stubber("route53")
        stubber.add_response(
            "list_hosted_zones",
            list_response([zone("example.com.", "ZPUBLIC")]),
            {},
        )
        with stubber, pytest.raises(HostedZoneNotFoundError, match="api.example.com"):
            HostedZoneResolver(domain_manager_context).resolve(
                DomainConfig.model_validate(
                    {"domainName": "api.example.com", "hostedZonePrivate": True}
                )
            )
