# SPDX-License-Identifier: MIT
# Copyright (c) 2025 app-logger contributors

"""Process-wide default values."""

import sys
from typing import Optional

FALLBACK_SUBSYSTEM = "AppLogger"


def host_package_identifier() -> Optional[str]:
    """Top-level package of the running ``__main__`` module, if any.

    Only set when the process was started with ``python -m <package>``;
    plain scripts and interactive sessions have no package identity.
    """
    main = sys.modules.get("__main__")
    spec = getattr(main, "__spec__", None)
    name = getattr(spec, "name", None)
    if not name:
        return None
    return name.partition(".")[0] or None


class _DefaultsMeta(type):
    # runpy imports the package before __main__ gets its __spec__,
    # so the subsystem is looked up on access rather than at import
    @property
    def subsystem(cls) -> str:
        return host_package_identifier() or FALLBACK_SUBSYSTEM


class Defaults(metaclass=_DefaultsMeta):
    """Default values used by ``AppLogger``."""

    category = "default"
    is_private = False
