"""API cost calculation for Claude models."""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping

from habitual.domain.models import ApiCallRecord, ModelPricing

# USD per 1M tokens
MODEL_PRICING: Mapping[str, ModelPricing] = MappingProxyType({
    "claude-opus-4-5": ModelPricing(input=15.00, output=75.00),
    "claude-sonnet-4-5": ModelPricing(input=3.00, output=15.00),
    "claude-sonnet-4": ModelPricing(input=3.00, output=15.00),
    "claude-haiku-4": ModelPricing(input=0.80, output=4.00),
    # Legacy models
    "claude-3-5-sonnet-20241022": ModelPricing(input=3.00, output=15.00),
    "claude-3-5-haiku-20241022": ModelPricing(input=0.80, output=4.00),
    "claude-3-opus-20240229": ModelPricing(input=15.00, output=75.00),
})

# Unknown models are billed at Sonnet rates
DEFAULT_PRICING = ModelPricing(input=3.00, output=15.00)


def _pricing(model: str) -> ModelPricing:
    return MODEL_PRICING.get(model, DEFAULT_PRICING)


def calculate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Cost in dollars, rounded to 6 decimal places."""
    pricing = _pricing(model)
    total = (input_tokens / 1_000_000) * pricing.input + (output_tokens / 1_000_000) * pricing.output
    return round(total, 6)


def get_model_pricing(model: str) -> Dict[str, Any]:
    pricing = _pricing(model)
    return {"input": pricing.input, "output": pricing.output, "perMillion": True}


def create_api_call_record(
    model: str,
    input_tokens: int,
    output_tokens: int,
    operation: str = "chat",
) -> ApiCallRecord:
    return ApiCallRecord(
        timestamp=datetime.now(timezone.utc).isoformat(),
        model=model,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        cost=calculate_cost(model, input_tokens, output_tokens),
        operation=operation,
    )
