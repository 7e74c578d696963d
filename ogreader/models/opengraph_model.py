from typing import Dict, List, Optional

from pydantic import BaseModel

from ogreader.core.models import MarkupVariant


class OpenGraphResponse(BaseModel):
    source_url: Optional[str] = None
    base_type: Optional[str] = None
    from_source: bool
    changed: bool
    properties: Dict[str, str]


class MarkupRequest(BaseModel):
    properties: Dict[str, str]
    variant: MarkupVariant = MarkupVariant.PROPERTY


class MarkupResponse(BaseModel):
    markup: List[str]
