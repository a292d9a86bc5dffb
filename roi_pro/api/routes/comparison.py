"""Side-by-side scenario comparison routes."""

from fastapi import APIRouter

from roi_pro.api.convert import build_config, comparison_to_response
from roi_pro.api.schemas import ComparisonRequest, ComparisonResponse
from roi_pro.engine.comparison import compare
from roi_pro.models.assumptions import with_overrides

router = APIRouter(prefix="/api/v1/comparison", tags=["comparison"])


@router.post("", response_model=ComparisonResponse)
def run_comparison(req: ComparisonRequest):
    config_a = build_config(req.a)
    config_b = build_config(req.b)
    if req.b.name is None:
        config_b = with_overrides(config_b, name="Property B")
    return comparison_to_response(compare(config_a, config_b))
