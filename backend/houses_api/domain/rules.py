# backend/houses_api/domain/rules.py
from __future__ import annotations

from .validation import INT64_MAX, RuleTable, at_most, max_length, not_blank, positive, required

HOUSE_RULES: RuleTable = {
    "address": [
        required("The Address field is required."),
        not_blank("The Address field must not be blank."),
        max_length(200),
    ],
    "country": [max_length(100)],
    "description": [max_length(2000)],
    "price": [
        required("The Price field is required."),
        positive("The Price field must be greater than 0."),
        at_most(INT64_MAX, "The Price field is too large."),
    ],
}

BID_RULES: RuleTable = {
    "house_id": [
        required("The HouseId field is required."),
        positive("The HouseId field must be greater than 0."),
    ],
    "bidder": [
        required("The Bidder field is required."),
        not_blank("The Bidder field must not be blank."),
        max_length(200),
    ],
    "amount": [
        required("The Amount field is required."),
        positive("The Amount field must be greater than 0."),
        at_most(INT64_MAX, "The Amount field is too large."),
    ],
}
