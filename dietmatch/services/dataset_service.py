"""
Dataset Service

Loads the nutrition CSV into an immutable food table and exposes the table
loaded into the running app.
"""

import csv
import logging
import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from flask import current_app

from dietmatch.models.food import FoodRecord
from dietmatch.utils.errors import DataLoadError

logger = logging.getLogger(__name__)

FOOD_TABLE_KEY = "food_table"


@dataclass(frozen=True)
class LoadSummary:
    path: str
    records: int
    skipped: int
    eligible: int


def _parse_calories(raw) -> Optional[float]:
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return None
    return value if math.isfinite(value) else None


def read_food_table(
    csv_path: str,
    description_column: str = "Shrt_Desc",
    energy_column: str = "Energ_Kcal"
) -> Tuple[Tuple[FoodRecord, ...], LoadSummary]:
    """
    Parse the nutrition CSV into food records, in file order.

    Rows with a blank description or a non-numeric energy value are skipped.

    Raises:
        DataLoadError: file missing or unreadable, required columns absent,
            or no usable rows at all
    """
    if not os.path.exists(csv_path):
        raise DataLoadError(csv_path, "file not found")

    foods = []
    skipped = 0
    try:
        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            header = reader.fieldnames or []
            missing = [c for c in (description_column, energy_column) if c not in header]
            if missing:
                raise DataLoadError(csv_path, f"missing columns {', '.join(missing)}")

            for line_no, row in enumerate(reader, start=2):
                description = (row.get(description_column) or "").strip()
                calories = _parse_calories(row.get(energy_column))
                if not description or calories is None:
                    skipped += 1
                    logger.debug("Skipping row %d of %s: %r", line_no, csv_path, row)
                    continue
                foods.append(FoodRecord(description=description, calories=calories))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DataLoadError(csv_path, str(e)) from e

    if not foods:
        raise DataLoadError(csv_path, "no usable rows")

    table = tuple(foods)
    summary = LoadSummary(
        path=csv_path,
        records=len(table),
        skipped=skipped,
        eligible=sum(1 for food in table if food.is_eligible),
    )
    logger.info(
        "Loaded %d foods from %s (%d skipped, %d eligible)",
        summary.records, csv_path, summary.skipped, summary.eligible,
    )
    return table, summary


def load_food_table_from_config(config) -> Tuple[FoodRecord, ...]:
    table, _ = read_food_table(
        config["FOODS_CSV_PATH"],
        description_column=config["FOODS_DESCRIPTION_COLUMN"],
        energy_column=config["FOODS_ENERGY_COLUMN"],
    )
    return table


def get_food_table() -> Optional[Tuple[FoodRecord, ...]]:
    """Food table of the current app, or None while the app is not ready."""
    return current_app.extensions.get(FOOD_TABLE_KEY)
