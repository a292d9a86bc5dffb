"""Projection routes: the primary API entry point."""

from fastapi import APIRouter
from fastapi.responses import Response

from roi_pro.api.convert import build_config, result_to_response
from roi_pro.api.schemas import ProjectionRequest, ProjectionResponse
from roi_pro.data.export import export_filename, to_csv
from roi_pro.engine.projection import run_projection

router = APIRouter(prefix="/api/v1/projection", tags=["projection"])


@router.post("", response_model=ProjectionResponse)
def project(req: ProjectionRequest):
    """Scenario inputs in, yearly projection and summary metrics out."""
    config = build_config(req)
    return result_to_response(config, run_projection(config))


@router.post("/export")
def export_csv(req: ProjectionRequest):
    """Yearly projection as a CSV download."""
    config = build_config(req)
    body = to_csv(run_projection(config))
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename(config.name)}"'},
    )
