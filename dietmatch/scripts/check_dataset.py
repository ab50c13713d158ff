import os
import sys

# Add the project root to the python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from config import Config
from dietmatch.services.dataset_service import read_food_table
from dietmatch.utils.errors import DataLoadError

def check_dataset(csv_path=None) -> int:
    csv_path = csv_path or Config.FOODS_CSV_PATH
    print(f"Checking food dataset {csv_path} ...")
    try:
        _, summary = read_food_table(
            csv_path,
            description_column=Config.FOODS_DESCRIPTION_COLUMN,
            energy_column=Config.FOODS_ENERGY_COLUMN,
        )
    except DataLoadError as e:
        print(f"Error: {e}")
        return 1

    print(f"Records loaded: {summary.records}")
    print(f"Rows skipped: {summary.skipped}")
    print(f"Eligible (calories > 0): {summary.eligible}")
    return 0

if __name__ == "__main__":
    sys.exit(check_dataset(sys.argv[1] if len(sys.argv) > 1 else None))
