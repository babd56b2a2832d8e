"""
Application constants.
"""
from datetime import timedelta

# Label shown for the "no selection" security classification option
EMPTY_SELECTION_LABEL = "..."

# Logical type pre-filled for fields flagged as a mixed / generic id
MIXED_ID_DEFAULT_LOGICAL_TYPE = "URN"

# Logical type categories accepted by logical_type_value_label
LOGICAL_TYPE_CATEGORIES = ("id", "generic")

# A compliance suggestion modified within this window of the policy's last
# modification has already been seen by the policy owner
LAST_SEEN_SUGGESTION_INTERVAL_DAYS = 7
LAST_SEEN_SUGGESTION_INTERVAL = timedelta(days=LAST_SEEN_SUGGESTION_INTERVAL_DAYS)

# Suggestions scored below this confidence are flagged as low quality
LOW_QUALITY_SUGGESTION_CONFIDENCE_THRESHOLD = 0.5
