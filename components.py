"""
Process-wide registry of page components, keyed by their tag name.

Components register themselves once when their module is imported:

    components.define("blog-articles-list", BlogArticlesList)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

_registry: Dict[str, type] = {}


class ComponentError(Exception):
    """Raised when a component tag is registered twice or is invalid."""

    def __init__(self, tag: str, message: Optional[str] = None):
        self.tag = tag
        super().__init__(message or f"Component already defined: {tag}")


def define(tag: str, component: type) -> None:
    if "-" not in tag or tag != tag.lower():
        raise ComponentError(tag, f"Invalid component tag: {tag!r}")
    if tag in _registry:
        raise ComponentError(tag)
    _registry[tag] = component
    logger.debug("Registered component %s -> %s", tag, component.__name__)


def get(tag: str) -> Optional[type]:
    return _registry.get(tag)


def defined() -> Dict[str, type]:
    return dict(_registry)
