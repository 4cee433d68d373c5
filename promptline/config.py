# config.py

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigurationError

PROVIDERS = ("gemini", "bedrock")
DEFAULT_PROVIDER = "gemini"
DEFAULT_MODEL_IDS = {
    "gemini": "gemini-2.0-flash",
    "bedrock": "anthropic.claude-3-5-haiku-20241022-v1:0",
}
DEFAULT_REGION = "us-west-2"
DEFAULT_TIMEOUT = 30.0

# Delay in seconds before the "Copied!" confirmation clears itself
COPY_RESET_DELAY = 2.0

# Environment variables consulted for each field, first match wins
_ENV_KEYS = {
    "api_key": ("PROMPTLINE_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY", "NEXT_PUBLIC_GEMINI_API_KEY"),
    "model_id": ("PROMPTLINE_MODEL_ID",),
    "provider": ("PROMPTLINE_PROVIDER",),
    "region": ("AWS_BEDROCK_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"),
    "endpoint": ("PROMPTLINE_ENDPOINT",),
}


@dataclass
class TransformerConfig:
    """
    Settings needed to reach the text-generation provider.

    Built once at startup and handed to the backend, so nothing below the
    CLI reads the process environment.
    """
    provider: str = DEFAULT_PROVIDER
    model_id: str = DEFAULT_MODEL_IDS[DEFAULT_PROVIDER]
    api_key: Optional[str] = None
    region: str = DEFAULT_REGION
    timeout: float = DEFAULT_TIMEOUT
    endpoint: Optional[str] = None
    copy_reset_delay: float = COPY_RESET_DELAY

    def __post_init__(self):
        if self.provider not in PROVIDERS:
            raise ConfigurationError(
                f"Unknown provider '{self.provider}', expected one of: {', '.join(PROVIDERS)}"
            )

    @classmethod
    def from_env(cls, overrides: Optional[Dict[str, Any]] = None,
                 environ: Optional[Mapping[str, str]] = None) -> "TransformerConfig":
        """
        Resolve a config with priority: explicit override, environment, default.

        Args:
            overrides: Values that win over the environment. None values are ignored.
            environ: Mapping to read instead of os.environ.
        """
        overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
        environ = os.environ if environ is None else environ

        def lookup(name: str) -> Optional[str]:
            if name in overrides:
                return overrides[name]
            for key in _ENV_KEYS.get(name, ()):
                if environ.get(key):
                    return environ[key]
            return None

        provider = lookup("provider") or DEFAULT_PROVIDER
        values: Dict[str, Any] = {
            "provider": provider,
            "model_id": lookup("model_id") or DEFAULT_MODEL_IDS.get(provider, ""),
            "api_key": lookup("api_key"),
            "region": lookup("region") or DEFAULT_REGION,
            "endpoint": lookup("endpoint"),
        }
        for name in ("timeout", "copy_reset_delay"):
            if name in overrides:
                values[name] = float(overrides[name])
        return cls(**values)
