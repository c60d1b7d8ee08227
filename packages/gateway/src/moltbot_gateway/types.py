"""
Type definitions for container environment mapping.
"""
from __future__ import annotations

from pydantic import BaseModel

# ─── Gateway routing ─────────────────────────────────────────────────────────


class GatewayTarget(BaseModel):
    """Provider-specific keys that receive the gateway credential pair."""
    provider: str
    api_key_var: str
    base_url_var: str

    model_config = {"frozen": True}


class GatewayRoute(BaseModel):
    """Result of inspecting an AI gateway base URL."""
    base_url: str
    provider_tag: str | None = None
    target: GatewayTarget | None = None

    model_config = {"frozen": True}
