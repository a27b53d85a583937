from .loader import load_config
from .models import (
    CaptureHooksConfig,
    DispatchConfig,
    HooksConfig,
    RenderChainConfig,
    RendererSpec,
)

__all__ = [
    "CaptureHooksConfig",
    "DispatchConfig",
    "HooksConfig",
    "RenderChainConfig",
    "RendererSpec",
    "load_config",
]
