from dataclasses import dataclass
from enum import Enum
import importlib

from mailsurface.constants import SURFACE_RUNTIME_INSTALL_HINT

REQUIRED_MODULES = ("PySide6.QtWebEngineWidgets", "PySide6.QtWebChannel")


class SurfaceRuntimeStatus(str, Enum):
    READY = "READY"
    MISSING_RUNTIME = "MISSING_RUNTIME"
    INIT_FAILED = "INIT_FAILED"


@dataclass(frozen=True)
class SurfaceRuntimeInfo:
    status: SurfaceRuntimeStatus
    detail: str
    engine: str = "qtwebengine"

    @property
    def ready(self) -> bool:
        return self.status == SurfaceRuntimeStatus.READY


def detect_surface_runtime() -> SurfaceRuntimeInfo:
    for module_name in REQUIRED_MODULES:
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            return SurfaceRuntimeInfo(
                status=SurfaceRuntimeStatus.MISSING_RUNTIME,
                detail=f"{module_name} is not available ({exc}). {SURFACE_RUNTIME_INSTALL_HINT}",
            )
        except Exception as exc:
            return SurfaceRuntimeInfo(
                status=SurfaceRuntimeStatus.INIT_FAILED,
                detail=f"Surface runtime check failed: {exc}",
            )

    return SurfaceRuntimeInfo(
        status=SurfaceRuntimeStatus.READY,
        detail="Qt WebEngine runtime detected.",
    )


__all__ = ["SurfaceRuntimeInfo", "SurfaceRuntimeStatus", "detect_surface_runtime"]
