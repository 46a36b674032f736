from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Response, status

from api.schemas import (
    SimpleStatusResponse,
    TemplateCatalogOut,
    TrainingBlockOut,
    TrainingMaxesOut,
    training_block_out,
)
from core.config import get_settings
from core.models import TrainingBlock
from core.services.export import block_csv, training_maxes_from_rows
from core.services.templates import template_catalog
from core.services.training_block import create_training_block
from core.validators import ExportRowsInput, TrainingBlockConfigInput

logger = logging.getLogger(__name__)
settings = get_settings()
router = APIRouter(prefix="/api/v1")


def _generate(payload: TrainingBlockConfigInput) -> TrainingBlock:
    try:
        return create_training_block(payload.to_config())
    except ValueError as exc:
        logger.warning("training_block_rejected", extra={"ctx_reason": str(exc)})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/health", response_model=SimpleStatusResponse, tags=["system"])
def health():
    return SimpleStatusResponse(status="ok")


@router.get("/templates", response_model=TemplateCatalogOut, tags=["templates"])
def list_templates():
    return TemplateCatalogOut(**template_catalog())


@router.post("/training-blocks", response_model=TrainingBlockOut, tags=["training-blocks"])
def generate_training_block(payload: TrainingBlockConfigInput):
    return training_block_out(_generate(payload))


@router.post("/training-blocks/export", tags=["training-blocks"])
def export_training_block(payload: TrainingBlockConfigInput):
    block = _generate(payload)
    filename = "".join(c if c.isalnum() or c in "-_" else "_" for c in block.name) or "training_block"
    return Response(
        content=block_csv(block, unit=settings.unit_label),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}.csv"'},
    )


@router.post("/training-maxes/extract", response_model=TrainingMaxesOut, tags=["training-blocks"])
def extract_training_maxes(payload: ExportRowsInput):
    try:
        maxes = training_maxes_from_rows(payload.rows)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return TrainingMaxesOut(training_maxes=maxes)
