"""Built-in defaults for ollacommit.

User overrides live in ~/.ollacommit/config.yaml and in environment
variables; see ollacommit.global_config.
"""

# Local inference service
DEFAULT_OLLAMA_HOST = "http://localhost:11434"
GENERATE_ENDPOINT = "/api/generate"
DEFAULT_MODEL = "llama3.2"

# Upper bound for the single inference request, in seconds
DEFAULT_TIMEOUT_SECONDS = 10.0

# Inference latency grows with prompt size, so only the head of the diff is sent
DEFAULT_MAX_DIFF_LINES = 400

# Environment variables that override config.yaml
ENV_HOST = "OLLAMA_HOST"
ENV_MODEL = "OLLACOMMIT_MODEL"
ENV_TIMEOUT = "OLLACOMMIT_TIMEOUT"
ENV_MAX_DIFF_LINES = "OLLACOMMIT_MAX_DIFF_LINES"

ENV_OVERRIDES = {
    "host": ENV_HOST,
    "model": ENV_MODEL,
    "timeout": ENV_TIMEOUT,
    "max_diff_lines": ENV_MAX_DIFF_LINES,
}

# Auto-generated files that only inflate the prompt
DEFAULT_IGNORE_PATTERNS = [
    "poetry.lock",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
    "uv.lock",
]
