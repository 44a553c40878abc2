from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

from config import BASE_CASE
from log_setup import get_logger
from simulation import ScenarioResult, SimulationInputs, project

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScenarioSpec:
    name: str
    color: str
    overrides: Mapping = field(default_factory=dict)

    def __post_init__(self):
        # read-only copy so a shared catalogue entry can't drift between builds
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))


CATALOGUE = (
    ScenarioSpec(BASE_CASE, "#0891b2"),
    ScenarioSpec("Inflation Spike (5%)", "#dc2626", {"inflation_rate": 5}),
    ScenarioSpec("Early Retirement (60)", "#7c3aed", {"retirement_age": 60}),
    ScenarioSpec("Market Downturn (4% return)", "#ea580c", {"expected_return": 4}),
    ScenarioSpec("Optimistic (10% return)", "#059669", {"expected_return": 10}),
)


def _check_catalogue(catalogue: Sequence[ScenarioSpec]):
    if not catalogue or catalogue[0].name != BASE_CASE:
        raise ValueError(f"Catalogue must start with '{BASE_CASE}'")
    names = [spec.name for spec in catalogue]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise ValueError(f"Duplicate scenario names: {', '.join(dupes)}")


def build_scenarios(base: SimulationInputs,
                    catalogue: Sequence[ScenarioSpec] = CATALOGUE) -> List[ScenarioResult]:
    """
    Run every catalogue entry against the same base inputs.
    Overrides never stack; output order follows the catalogue, base case first.
    """
    _check_catalogue(catalogue)
    results = [project(base, spec.name, spec.color, spec.overrides) for spec in catalogue]
    logger.debug("Built %d scenarios from %s", len(results), base)
    return results


def scenario_by_name(results: Sequence[ScenarioResult], name: str) -> Optional[ScenarioResult]:
    return next((r for r in results if r.name == name), None)
