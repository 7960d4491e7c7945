"""
Runtime configuration for the university agent.

Values come from the environment (see ``AgentConfig.from_env``) and can be
overridden per run from the command line.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional


BACKENDS = ("ollama", "llamacpp")
_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AgentConfig:
    backend: str = "ollama"
    model: str = "deepseek-r1:1.5b"
    base_url: str = "http://localhost:11434"
    temperature: float = 0.1
    model_path: str = "model.gguf"  # llamacpp backend only
    n_ctx: int = 4096
    max_tokens: int = 512
    max_iterations: int = 5
    verbose: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {', '.join(BACKENDS)}, got {self.backend!r}")
        if not self.model:
            raise ValueError("model is required")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError("temperature must be between 0 and 2")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AgentConfig":
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(key: str, default: Any) -> Any:
            raw = (env.get(key) or "").strip()
            if not raw:
                return default
            if isinstance(default, bool):
                return raw.lower() in _TRUE
            if isinstance(default, int):
                return int(raw)
            if isinstance(default, float):
                return float(raw)
            return raw

        return cls(
            backend=get("UNI_AGENT_BACKEND", defaults.backend).lower(),
            model=get("OLLAMA_MODEL", defaults.model),
            base_url=get("OLLAMA_BASE_URL", defaults.base_url).rstrip("/"),
            temperature=get("UNI_AGENT_TEMPERATURE", defaults.temperature),
            model_path=get("LLAMA_MODEL_PATH", defaults.model_path),
            n_ctx=get("LLAMA_N_CTX", defaults.n_ctx),
            max_tokens=get("LLAMA_MAX_TOKENS", defaults.max_tokens),
            max_iterations=get("UNI_AGENT_MAX_ITERATIONS", defaults.max_iterations),
            verbose=get("UNI_AGENT_VERBOSE", defaults.verbose),
            log_level=get("UNI_AGENT_LOG_LEVEL", defaults.log_level).upper(),
        )

    def with_overrides(self, **overrides: Any) -> "AgentConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if v is not None and k in known}
        return replace(self, **changes) if changes else self
