"""Markers for hooklite hook specifications and implementations."""

import pluggy

HOOK_NAMESPACE = "hooklite"

hook_spec = pluggy.HookspecMarker(HOOK_NAMESPACE)
hook_impl = pluggy.HookimplMarker(HOOK_NAMESPACE)
