# src/fatcp/core/registry.py
from importlib.metadata import entry_points

from fastapi import APIRouter

from fatcp.core.logging import get_logger

EP_GROUP = "fatcp.modules"

log = get_logger("fatcp.registry")


def load_module_routers() -> list[APIRouter]:
    """Every `fatcp.modules` entry point must load to an APIRouter."""
    routers: list[APIRouter] = []
    for ep in entry_points(group=EP_GROUP):
        router = ep.load()
        if isinstance(router, APIRouter):
            routers.append(router)
        else:
            log.warning("entry point %s is not an APIRouter, skipped", ep.name)
    return routers
