"""Feature modules.

Each package here that exports a ``router`` is mounted under ``/api/v1``;
packages without one (``users``) only provide models and services.
"""

from importlib import import_module
from pathlib import Path

import structlog
from fastapi import APIRouter


logger = structlog.get_logger()


def discover_modules() -> list[APIRouter]:
    """Import every module package and collect the routers they export."""
    routers: list[APIRouter] = []

    for path in sorted(Path(__file__).parent.iterdir()):
        if not path.is_dir() or path.name.startswith("_"):
            continue
        module = import_module(f"dealerdesk.modules.{path.name}")
        router = getattr(module, "router", None)
        if router is not None:
            routers.append(router)
            logger.debug("module_loaded", module=path.name)

    return routers
