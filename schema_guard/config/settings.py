"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_VALIDATION_FAILURES: bool = os.getenv("SCHEMA_GUARD_LOG_FAILURES", "true").lower() == "true"
MAX_LOG_DATA_CHARS: int = int(os.getenv("SCHEMA_GUARD_MAX_LOG_DATA_CHARS", "200"))

# --- JSON Schema engine ---
JSONSCHEMA_FORMAT_CHECK: bool = os.getenv("SCHEMA_GUARD_JSONSCHEMA_FORMAT_CHECK", "false").lower() == "true"
