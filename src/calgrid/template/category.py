# SPDX-License-Identifier: MIT

from calgrid.color import DEFAULT_BASE_COLOR
from calgrid.model.category import Category

UNCATEGORIZED_ID = "uncategorized"


def get_uncategorized_category() -> Category:
    return {
        "id": UNCATEGORIZED_ID,
        "name": "uncategorized",
        "color": DEFAULT_BASE_COLOR,
        "icon": None,
    }
