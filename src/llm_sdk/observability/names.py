# src/llm_sdk/observability/names.py

"""Standard metric names for llm-sdk observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Every metric carries an ``operation`` label (chat_completion, create_image,
speech, whisper, embedding).
"""

# ============================================================================
# Request Metrics (one per public call, retries included)
# ============================================================================

# Duration
REQUEST_DURATION = "llm_sdk_request_duration"

# Counters
REQUESTS_TOTAL = "llm_sdk_requests_total"
ERRORS_TOTAL = "llm_sdk_errors_total"


# ============================================================================
# Attempt Metrics (one per HTTP send)
# ============================================================================

# Duration
ATTEMPT_DURATION = "llm_sdk_attempt_duration"

# Counters (labelled with the HTTP status, or "error" on transport failure)
ATTEMPTS_TOTAL = "llm_sdk_attempts_total"
RETRIES_TOTAL = "llm_sdk_retries_total"
