# src/gpt3_kit/observability/names.py

"""Metric names emitted by gpt3-kit.

Duration metrics are in milliseconds. Unit conversion belongs to the
metrics backend.
"""

# Duration
COMPLETION_REQUEST_DURATION = "completion_request_duration"

# Counters
COMPLETION_REQUESTS_TOTAL = "completion_requests_total"
COMPLETION_ERRORS_TOTAL = "completion_errors_total"

# Gauges
COMPLETION_RESULTS_RETURNED = "completion_results_returned"
