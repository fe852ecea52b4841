"""
OpenAI access shared by the student-facing assistants.

LLMService.complete() is the single place that talks to the API: it checks
the monthly token cap, calls chat completions, and writes an LLMUsageLog row
with token counts and cost for every attempt. When no key is configured (or
generation is switched off) `available` is False and callers use their own
rule-based answers instead.
"""
import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

import openai
from django.db.models import Sum
from django.utils import timezone

from config.constants import MSG_EMPTY_MODEL_RESPONSE, MSG_TOKEN_CAP_REACHED
from .models import LLMConfig, LLMUsageLog
from .security import decrypt_value

logger = logging.getLogger("apps.core")

DEFAULT_MODEL = "gpt-4o-mini"

# USD per 1M text tokens. Unknown models are logged with zero cost.
PRICING_PER_1M = {
    "gpt-4.1": {"input": 2.00, "output": 8.00},
    "gpt-4.1-mini": {"input": 0.40, "output": 1.60},
    "gpt-4.1-nano": {"input": 0.10, "output": 0.40},
    "gpt-4o": {"input": 2.50, "output": 10.00},
    "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    "gpt-5": {"input": 1.25, "output": 10.00},
    "gpt-5-mini": {"input": 0.25, "output": 2.00},
    "gpt-5-nano": {"input": 0.05, "output": 0.40},
}


def list_openai_models(api_key: str) -> List[str]:
    client = openai.OpenAI(api_key=api_key)
    models = client.models.list()
    return sorted(m.id for m in models.data if m.id.startswith("gpt-"))


def calculate_cost(model_id: str, prompt_tokens: int, completion_tokens: int) -> Dict[str, Decimal]:
    info = PRICING_PER_1M.get(model_id)
    if not info:
        zero = Decimal("0")
        return {"input": zero, "output": zero, "total": zero}
    cost_input = Decimal(prompt_tokens) / Decimal(1_000_000) * Decimal(str(info["input"]))
    cost_output = Decimal(completion_tokens) / Decimal(1_000_000) * Decimal(str(info["output"]))
    return {"input": cost_input, "output": cost_output, "total": cost_input + cost_output}


def model_choices(model_ids: List[str]) -> List[Tuple[str, str]]:
    """Cheapest first, with the per-1M price in the label."""
    def cost_key(model_id):
        info = PRICING_PER_1M.get(model_id)
        if not info:
            return (float("inf"), model_id)
        return (info["input"] + info["output"], model_id)

    choices = []
    for model_id in sorted(model_ids, key=cost_key):
        info = PRICING_PER_1M.get(model_id)
        if info:
            label = f"{model_id} (${info['input']:.2f} in / ${info['output']:.2f} out per 1M)"
        else:
            label = f"{model_id} (cost unknown)"
        choices.append((model_id, label))
    return choices


@dataclass
class LLMResult:
    content: Optional[str]
    tokens: int = 0
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None and bool(self.content)


class LLMService:

    def __init__(self):
        config = LLMConfig.load()
        self.config = config
        self.api_key = decrypt_value(config.encrypted_api_key)
        if self.api_key and config.generation_enabled:
            self.client = openai.OpenAI(api_key=self.api_key)
        else:
            self.client = None

    @property
    def available(self):
        return self.client is not None

    @property
    def model(self):
        return self.config.active_model or DEFAULT_MODEL

    def tokens_used_this_month(self):
        month_start = timezone.now().replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        return LLMUsageLog.objects.filter(created_at__gte=month_start).aggregate(
            total=Sum('total_tokens')
        )['total'] or 0

    def _cap_reached(self):
        cap = self.config.monthly_token_cap
        if not cap or self.tokens_used_this_month() < cap:
            return False
        if self.config.auto_disable_on_cap:
            self.config.generation_enabled = False
            self.config.save()
            logger.warning("Monthly token cap of %s reached; generation disabled", cap)
        return True

    def complete(self, request_type, system_prompt, messages, actor=None, json_mode=False):
        """
        Run one chat completion. `messages` is the user/assistant turn list
        without the system message. Returns an LLMResult; never raises.
        """
        if not self.client:
            return LLMResult(None, error="LLM not configured")

        if self._cap_reached():
            return LLMResult(None, error=MSG_TOKEN_CAP_REACHED)

        if self.config.system_prompt:
            system_prompt = f"{system_prompt}\n\n{self.config.system_prompt}"
        user_prompt = messages[-1]["content"] if messages else ""
        kwargs = {
            "model": self.model,
            "messages": [{"role": "system", "content": system_prompt}, *messages],
            "temperature": float(self.config.temperature),
            "max_tokens": self.config.max_output_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        start = time.time()
        try:
            response = self.client.chat.completions.create(**kwargs)
        except openai.OpenAIError as e:
            logger.error("LLM call failed (%s via %s): %s", request_type, self.model, e)
            LLMUsageLog.objects.create(
                request_type=request_type,
                model_name=self.model,
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                latency_ms=int((time.time() - start) * 1000),
                success=False,
                error_message=str(e),
                actor=actor,
            )
            return LLMResult(None, error=str(e))

        latency_ms = int((time.time() - start) * 1000)
        content = response.choices[0].message.content or ""
        usage = response.usage
        prompt_tokens = usage.prompt_tokens if usage else 0
        completion_tokens = usage.completion_tokens if usage else 0
        tokens = usage.total_tokens if usage else 0
        costs = calculate_cost(self.model, prompt_tokens, completion_tokens)
        LLMUsageLog.objects.create(
            request_type=request_type,
            model_name=self.model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            response_text=content,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=tokens,
            cost_input=costs["input"],
            cost_output=costs["output"],
            cost_total=costs["total"],
            latency_ms=latency_ms,
            success=True,
            actor=actor,
        )
        logger.info("LLM %s via %s: %s tokens in %sms", request_type, self.model, tokens, latency_ms)
        if not content.strip():
            logger.warning("LLM %s via %s returned an empty response", request_type, self.model)
            return LLMResult(None, tokens=tokens, error=MSG_EMPTY_MODEL_RESPONSE)
        return LLMResult(content, tokens=tokens)
