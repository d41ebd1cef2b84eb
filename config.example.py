# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "WHATTODO_APP_NAME": "App display name (default: whattodo).",
    "WHATTODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "WHATTODO_DATA_DIR": "Local directory for whattodo.log (default: .local/whattodo).",
    # Remote API
    "WHATTODO_API_BASE": "Base URL of the tasks API (default: http://localhost:8080).",
    "WHATTODO_HTTP_CONNECT_TIMEOUT_SECONDS": "Connect timeout in seconds (default: 5).",
    "WHATTODO_HTTP_READ_TIMEOUT_SECONDS": "Read timeout in seconds (default: 15).",
    # View
    "WHATTODO_DEFAULT_COLOR": "Color for new tasks without color=... (default: #0d6efd).",
    "WHATTODO_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
}
