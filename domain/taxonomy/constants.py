"""Reserved ids and ranks shared across the taxonomy views."""

# Synthetic "Pending Review" node; negative ids are never assigned upstream.
PENDING_ID = -1
ROOT_ID = 0

# Types of this rank may not be chosen as a parent.
NON_PARENT_RANK = 9

PENDING_REVIEW_NAME = "Pending Review"
FALLBACK_LANGUAGE = "en"
