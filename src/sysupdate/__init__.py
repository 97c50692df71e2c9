"""sysupdate-prefs - System update preference visibility and click dispatch"""

__version__ = "1.0.0"
__description__ = "System update preference visibility and click dispatch"

__all__ = ["SystemUpdatePreferenceController", "__version__"]


def __getattr__(name: str):
    """Lazy import so importing sysupdate.config does not pull in the core."""
    if name == "SystemUpdatePreferenceController":
        from .core.controller import SystemUpdatePreferenceController

        return SystemUpdatePreferenceController
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
