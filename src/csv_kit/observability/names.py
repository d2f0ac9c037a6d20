# src/csv_kit/observability/names.py

"""Standard metric names for csv-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
CSV_PARSE_DURATION = "csv_parse_duration"

# Counters
CSV_PARSE_REQUESTS_TOTAL = "csv_parse_requests_total"
CSV_PARSE_ERRORS_TOTAL = "csv_parse_errors_total"

# Counters (output volume accumulates over time)
CSV_RECORDS_PARSED = "csv_records_parsed"
CSV_FIELDS_PARSED = "csv_fields_parsed"

# Gauges
CSV_INPUT_SIZE = "csv_input_size"


# ============================================================================
# Dialect Metrics
# ============================================================================

# Gauges
DIALECTS_LOADED = "dialects_loaded"
