"""
Build the environment passed into the moltbot container.

Direct provider credentials, channel tokens and the bind mode pass straight
through. An AI gateway key/URL pair is routed to whichever provider the last
path segment of the gateway URL names, overriding the direct credentials for
that provider. A couple of host-side names are renamed for the container.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from .types import GatewayRoute, GatewayTarget

logger = logging.getLogger(__name__)

AI_GATEWAY_API_KEY = "AI_GATEWAY_API_KEY"
AI_GATEWAY_BASE_URL = "AI_GATEWAY_BASE_URL"

# Copied unchanged when set
PASSTHROUGH_ENV_VARS: tuple[str, ...] = (
    "GOOGLE_API_KEY",
    "GOOGLE_BASE_URL",
    "OPENAI_API_KEY",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_DM_POLICY",
    "DISCORD_BOT_TOKEN",
    "DISCORD_DM_POLICY",
    "SLACK_BOT_TOKEN",
    "SLACK_APP_TOKEN",
    "CLAWDBOT_BIND_MODE",
)

# Host name → container name
RENAMED_ENV_VARS: dict[str, str] = {
    "MOLTBOT_GATEWAY_TOKEN": "CLAWDBOT_GATEWAY_TOKEN",
    "DEV_MODE": "CLAWDBOT_DEV_MODE",
}

# Provider tag (last URL path segment) → keys receiving the gateway pair
GATEWAY_TARGETS: dict[str, GatewayTarget] = {
    "google-ai-studio": GatewayTarget(
        provider="google",
        api_key_var="GOOGLE_API_KEY",
        base_url_var="GOOGLE_BASE_URL",
    ),
    "openai": GatewayTarget(
        provider="openai",
        api_key_var="OPENAI_API_KEY",
        base_url_var="OPENAI_BASE_URL",
    ),
}


def normalize_gateway_url(url: str) -> str:
    """Strip every trailing slash from a gateway base URL."""
    return url.rstrip("/")


def gateway_provider_tag(url: str) -> str | None:
    """Return the last non-empty path segment of *url*, or None if it has none."""
    segments = [s for s in normalize_gateway_url(url).split("/") if s]
    return segments[-1] if segments else None


def resolve_gateway_target(url: str) -> GatewayRoute:
    """Work out which provider, if any, a gateway base URL fronts."""
    base_url = normalize_gateway_url(url)
    tag = gateway_provider_tag(base_url)
    logger.debug("Gateway URL %s has provider tag %r", base_url, tag)
    return GatewayRoute(
        base_url=base_url,
        provider_tag=tag,
        target=GATEWAY_TARGETS.get(tag) if tag is not None else None,
    )


def _defined(env: Mapping[str, str | None], name: str) -> str | None:
    value = env.get(name)
    return value if isinstance(value, str) and value else None


def build_env_vars(env: Mapping[str, str | None]) -> dict[str, str]:
    """Build the container environment from a host environment snapshot.

    Never raises: absent, empty or non-string values are skipped, and an
    unrecognized gateway URL simply routes no provider.
    """
    result: dict[str, str] = {}

    for name in PASSTHROUGH_ENV_VARS:
        value = _defined(env, name)
        if value is not None:
            result[name] = value

    gateway_key = _defined(env, AI_GATEWAY_API_KEY)
    gateway_url = _defined(env, AI_GATEWAY_BASE_URL)

    if gateway_url is not None:
        result[AI_GATEWAY_BASE_URL] = normalize_gateway_url(gateway_url)

    # Must run after the passthrough: the gateway wins over direct credentials
    if gateway_key is not None and gateway_url is not None:
        route = resolve_gateway_target(gateway_url)
        if route.target is not None:
            logger.debug("Routing AI gateway credentials to %s", route.target.provider)
            result[route.target.api_key_var] = gateway_key
            result[route.target.base_url_var] = route.base_url
        else:
            logger.warning(
                "AI gateway provider %r is not supported; expected one of: %s",
                route.provider_tag,
                ", ".join(GATEWAY_TARGETS),
            )
    elif gateway_key is not None:
        logger.warning("%s is set without %s; ignoring it", AI_GATEWAY_API_KEY, AI_GATEWAY_BASE_URL)

    for source, target in RENAMED_ENV_VARS.items():
        value = _defined(env, source)
        if value is not None:
            result[target] = value

    return result
