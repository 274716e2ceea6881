"""Fachadas finas por recurso sobre paginação, REST e verificação."""

from .base import ResourceFacade, check_date
from .event import EventResource
from .pix_domain import PixDomainResource
from .pix_request import PixRequestResource
from .request import RequestResource
from .webhook import WebhookResource

__all__ = [
    "EventResource",
    "PixDomainResource",
    "PixRequestResource",
    "RequestResource",
    "ResourceFacade",
    "WebhookResource",
    "check_date",
]
