from typing import Optional

from fastapi import APIRouter, Depends, Query

from ogreader.config.logging_config import get_logger
from ogreader.core.models import OpenGraph
from ogreader.models.opengraph_model import MarkupRequest, MarkupResponse, OpenGraphResponse
from ogreader.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter()

container = ServiceContainer()


def get_container() -> ServiceContainer:
    """Dependency returning the process-wide service container"""
    return container


@router.get("", response_model=OpenGraphResponse)
def read_opengraph(
    url: str = Query(...),
    ignore_specification_errors: Optional[bool] = Query(None),
    mine_extra_information: Optional[bool] = Query(None),
    services: ServiceContainer = Depends(get_container),
):
    logger.info(f"Received request for Open Graph data: {url}")
    reader = services.get_reader(ignore_specification_errors, mine_extra_information)
    og = reader.read(url)
    logger.info(f"Successfully returned Open Graph data for: {url}")
    return og.to_dict()


@router.post("/markup", response_model=MarkupResponse)
def render_markup(request: MarkupRequest):
    og = OpenGraph()
    for name, value in request.properties.items():
        og.set_property(name, value)
    return {"markup": og.to_meta_markup(request.variant)}
