"""Plugin hook specifications and markers."""

import pluggy

PROJECT_NAME = "content_localization"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

__all__ = ["PROJECT_NAME", "hookspec", "hookimpl"]
