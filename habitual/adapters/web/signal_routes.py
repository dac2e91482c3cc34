"""Signal, survey focus and pricing API routes."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from habitual.adapters.storage.json_store import JsonStorage
from habitual.config import AppConfig
from habitual.domain.focus import compute_focus_dimensions
from habitual.domain.pricing import get_model_pricing
from habitual.domain.signal_parser import SignalRegistry, UnknownChatType, registry_for_chat_type
from habitual.infrastructure.metrics import MetricsRecorder

signals_router = APIRouter(prefix="/signals", tags=["Signals"])
survey_router = APIRouter(prefix="/survey", tags=["Survey"])
pricing_router = APIRouter(prefix="/pricing", tags=["Pricing"])

settings = AppConfig.from_env()

metrics: Optional[MetricsRecorder] = None


def get_metrics() -> MetricsRecorder:
    global metrics
    if metrics is None:
        metrics = MetricsRecorder(JsonStorage(settings.storage.data_dir), key=settings.storage.api_calls_key)
    return metrics


def resolve_registry(chat_type: Optional[str]) -> SignalRegistry:
    try:
        return registry_for_chat_type(chat_type or settings.chat_type)
    except UnknownChatType:
        raise HTTPException(status_code=404, detail=f"Unknown chat type: {chat_type}")


class SignalRequest(BaseModel):
    text: str
    chat_type: Optional[str] = None


class SignalResponse(BaseModel):
    signal: Optional[Dict[str, Any]] = None


class SignalCheckResponse(BaseModel):
    has_signal: bool


@signals_router.post("/parse", response_model=SignalResponse)
async def parse(req: SignalRequest):
    signal = resolve_registry(req.chat_type).parse(req.text)
    return SignalResponse(signal=signal.to_dict() if signal else None)


@signals_router.post("/check", response_model=SignalCheckResponse)
async def check(req: SignalRequest):
    return SignalCheckResponse(has_signal=resolve_registry(req.chat_type).has_signal(req.text))


# --- Survey focus ---

class FocusRequest(BaseModel):
    user_scores: Dict[str, Dict[str, Optional[float]]]


@survey_router.post("/focus")
async def focus(req: FocusRequest):
    return compute_focus_dimensions(req.user_scores).to_dict()


# --- Pricing ---

class CostRequest(BaseModel):
    model: str
    input_tokens: int = Field(ge=0)
    output_tokens: int = Field(ge=0)
    operation: str = "chat"


@pricing_router.get("/usage")
async def usage():
    return get_metrics().summary()


@pricing_router.get("/{model}")
async def pricing(model: str):
    return {"model": model, **get_model_pricing(model)}


@pricing_router.post("/cost")
async def cost(req: CostRequest):
    record = get_metrics().record(req.model, req.input_tokens, req.output_tokens, req.operation)
    return record.to_dict()
