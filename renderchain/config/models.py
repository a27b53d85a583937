from pydantic import BaseModel, Field
from typing import Literal


class CaptureHooksConfig(BaseModel):
    begin: str = Field(min_length=1)
    end: str = Field(min_length=1)
    begin_priority: int = -9999
    end_priority: int = 9999


def _admin_hooks() -> CaptureHooksConfig:
    return CaptureHooksConfig(begin="admin_enqueue_scripts", end="admin_print_footer_scripts")


def _front_hooks() -> CaptureHooksConfig:
    return CaptureHooksConfig(begin="wp_enqueue_scripts", end="wp_print_footer_scripts")


class HooksConfig(BaseModel):
    admin: CaptureHooksConfig = Field(default_factory=_admin_hooks)
    front: CaptureHooksConfig = Field(default_factory=_front_hooks)

    def for_pipeline(self, pipeline: str) -> CaptureHooksConfig:
        return self.admin if pipeline == "admin" else self.front


class DispatchConfig(BaseModel):
    on_error: Literal["raise", "isolate"] = "raise"
    callable_check: Literal["dispatch", "register"] = "dispatch"


class RendererSpec(BaseModel):
    pipeline: str = Field(min_length=1)
    callback: str = Field(min_length=1)
    priority: int = 10


class RenderChainConfig(BaseModel):
    default_priority: int = 10
    dispatch: DispatchConfig = Field(default_factory=DispatchConfig)
    hooks: HooksConfig = Field(default_factory=HooksConfig)
    renderers: list[RendererSpec] = Field(default_factory=list)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
