"""FastAPI dependency injection."""

from functools import lru_cache

from roi_pro.data.scenarios import ScenarioStore


@lru_cache
def get_scenario_store() -> ScenarioStore:
    return ScenarioStore()
