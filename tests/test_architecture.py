"""Architectural boundary tests using pytest-archon."""

from pytest_archon import archrule


def test_domain_has_no_dependencies_on_outer_layers() -> None:
    """Domain models and ports must not import adapters or application services."""
    (
        archrule("domain", comment="Domain should be independent")
        .match("transit_live.domain*")
        .should_not_import("transit_live.adapters*")
        .should_not_import("transit_live.application*")
        .may_import("transit_live.domain*")
        .check("transit_live")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("transit_live.application*")
        .should_not_import("transit_live.adapters*")
        .may_import("transit_live.domain*")
        .may_import("transit_live.application*")
        .check("transit_live")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters reach services only through domain ports."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("transit_live.adapters*")
        .should_not_import("transit_live.application*")
        .may_import("transit_live.domain*")
        .may_import("transit_live.adapters*")
        .check("transit_live", only_direct_imports=True)
    )
