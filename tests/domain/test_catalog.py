from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.models import ExpectedScenario, GroupKey
from batch_report.infrastructure.storage.catalog_store import default_catalog


def test_duplicate_full_keys_are_kept_once():
    catalog = ExpectedCatalog(
        [
            ExpectedScenario("Equity", "US Large Cap", "Entity A", "Base"),
            ExpectedScenario("Equity", "US Large Cap", "Entity A", "Base"),
            ExpectedScenario("Equity", "US Large Cap", "Entity A", "Stress"),
        ]
    )
    assert len(catalog) == 2
    assert catalog.expected_count("Equity", "US Large Cap", "Entity A") == 2


def test_queries(catalog):
    assert catalog.is_expected("Equity", "US Large Cap", "Entity B", "Base")
    assert not catalog.is_expected("Equity", "US Large Cap", "Entity B", "Stress")
    assert catalog.expected_count("Commodities", "Energy", "Entity A") == 0
    assert catalog.scenarios_for_group("Commodities", "Energy", "Entity A") == ()
    assert catalog.group_keys() == {
        GroupKey("Equity", "US Large Cap", "Entity A"),
        GroupKey("Equity", "US Large Cap", "Entity B"),
        GroupKey("Fixed Income", "Government", "Entity A"),
    }
    assert catalog.asset_classes() == {"Equity", "Fixed Income"}
    assert catalog.entities() == {"Entity A", "Entity B"}
    assert catalog.products_for("Equity") == {"US Large Cap"}
    assert catalog.total_expected() == 4


def test_group_members_keep_catalog_order(catalog):
    groups = catalog.grouped_by_group_key()
    members = groups[GroupKey("Equity", "US Large Cap", "Entity A")]
    assert [m.scenario for m in members] == ["Base", "Stress"]


def test_embedded_catalog_has_72_scenarios():
    catalog = default_catalog()
    assert len(catalog) == 72
    assert catalog.is_expected("Equity", "US Large Cap", "Entity A", "Base")
