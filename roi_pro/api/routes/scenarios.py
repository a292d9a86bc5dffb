"""Saved scenario routes."""

from fastapi import APIRouter, Depends, HTTPException

from roi_pro.api.convert import build_config, config_to_request
from roi_pro.api.deps import get_scenario_store
from roi_pro.api.schemas import ProjectionRequest, ScenarioListResponse
from roi_pro.data.scenarios import ScenarioNotFound, ScenarioStore

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


@router.get("", response_model=ScenarioListResponse)
def list_scenarios(store: ScenarioStore = Depends(get_scenario_store)):
    return ScenarioListResponse(names=store.list_names())


@router.get("/{name}", response_model=ProjectionRequest)
def get_scenario(name: str, store: ScenarioStore = Depends(get_scenario_store)):
    try:
        config = store.load(name)
    except ScenarioNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return config_to_request(config)


@router.put("", response_model=ProjectionRequest)
def save_scenario(req: ProjectionRequest, store: ScenarioStore = Depends(get_scenario_store)):
    """Save (or overwrite) a scenario by name. Unset fields take baseline values."""
    if not req.name:
        raise HTTPException(status_code=400, detail="Scenario name is required")
    config = build_config(req)
    store.save(config)
    return config_to_request(config)


@router.delete("/{name}", status_code=204)
def delete_scenario(name: str, store: ScenarioStore = Depends(get_scenario_store)):
    try:
        store.delete(name)
    except ScenarioNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
