DEFAULT_FLOOR: int = 0
FULL_PROCESS: bool = True
CASE_SENSITIVE: bool = False

# Scorer used when none is named: "standard", "partial", "token_sort",
# "token_set", "partial_token_set" or "partial_token_sort"
DEFAULT_SCORER: str = "standard"

# Rows printed by the CLI / returned by the web API
TOP_K: int = 10

# /* ~~~ cap on text units per input at the CLI / HTTP boundary and for served items (DP cost is |a|*|b|) ~~~ */
MAX_INPUT_UNITS: int = 1_000
