"""
moltbot_gateway — container environment mapping for the moltbot gateway
"""

from .config import APP_NAME, VERSION, load_env_file, snapshot_environ
from .env import (
    AI_GATEWAY_API_KEY,
    AI_GATEWAY_BASE_URL,
    GATEWAY_TARGETS,
    PASSTHROUGH_ENV_VARS,
    RENAMED_ENV_VARS,
    build_env_vars,
    gateway_provider_tag,
    normalize_gateway_url,
    resolve_gateway_target,
)
from .types import GatewayRoute, GatewayTarget

__version__ = VERSION

__all__ = [
    "AI_GATEWAY_API_KEY",
    "AI_GATEWAY_BASE_URL",
    "APP_NAME",
    "GATEWAY_TARGETS",
    "GatewayRoute",
    "GatewayTarget",
    "PASSTHROUGH_ENV_VARS",
    "RENAMED_ENV_VARS",
    "VERSION",
    "build_env_vars",
    "gateway_provider_tag",
    "load_env_file",
    "normalize_gateway_url",
    "resolve_gateway_target",
    "snapshot_environ",
]
