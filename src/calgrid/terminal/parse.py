# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from calgrid.color import normalize_color
from calgrid.errors import InvalidColorFormat
from calgrid.time import date_from_str, today_local


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a day given as YYYY-MM-DD, today/yesterday/tomorrow or a day offset.

    Raises:
        typer.BadParameter: If the value matches none of the accepted forms
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?[0-9]+$", date):
        return today_local().add(days=int(date))

    if date == "today" or date == "t":
        return today_local()
    if date == "yesterday" or date == "y":
        return today_local().subtract(days=1)
    if date == "tomorrow" or date == "o":
        return today_local().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_color(color_param: str) -> str:
    try:
        return normalize_color(color_param)
    except InvalidColorFormat as e:
        raise typer.BadParameter(str(e))
