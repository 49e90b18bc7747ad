"""Static catalog of expected scenarios."""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .models import ExpectedScenario, GroupKey, ScenarioKey


class ExpectedCatalog:
    """Immutable table of expected (asset class, product, entity, scenario) tuples.

    Insertion order is preserved. A full key listed twice is kept once, at its
    first position.
    """

    def __init__(self, scenarios: Iterable[ExpectedScenario]) -> None:
        ordered: dict[ScenarioKey, ExpectedScenario] = {}
        for scenario in scenarios:
            ordered.setdefault(scenario.full_key, scenario)
        self._scenarios: tuple[ExpectedScenario, ...] = tuple(ordered.values())
        self._full_keys = frozenset(ordered)

        groups: dict[GroupKey, list[ExpectedScenario]] = {}
        for scenario in self._scenarios:
            groups.setdefault(scenario.group_key, []).append(scenario)
        self._groups: dict[GroupKey, tuple[ExpectedScenario, ...]] = {
            key: tuple(members) for key, members in groups.items()
        }

    def __len__(self) -> int:
        return len(self._scenarios)

    def __iter__(self):
        return iter(self._scenarios)

    def all_scenarios(self) -> Sequence[ExpectedScenario]:
        return self._scenarios

    def scenarios_for_group(self, asset_class: str, product: str, entity: str) -> Sequence[ExpectedScenario]:
        return self._groups.get(GroupKey(asset_class, product, entity), ())

    def is_expected(self, asset_class: str, product: str, entity: str, scenario: str) -> bool:
        return ScenarioKey(asset_class, product, entity, scenario) in self._full_keys

    def grouped_by_group_key(self) -> Mapping[GroupKey, Sequence[ExpectedScenario]]:
        return dict(self._groups)

    def expected_count(self, asset_class: str, product: str, entity: str) -> int:
        return len(self.scenarios_for_group(asset_class, product, entity))

    def group_keys(self) -> frozenset[GroupKey]:
        return frozenset(self._groups)

    def asset_classes(self) -> frozenset[str]:
        return frozenset(s.asset_class for s in self._scenarios)

    def entities(self) -> frozenset[str]:
        return frozenset(s.entity for s in self._scenarios)

    def products_for(self, asset_class: str) -> frozenset[str]:
        return frozenset(s.product for s in self._scenarios if s.asset_class == asset_class)

    def total_expected(self) -> int:
        return len(self._scenarios)
