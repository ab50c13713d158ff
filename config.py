from dotenv import load_dotenv
import os

load_dotenv()


def _split_csv(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


class Config:
    # Food table loaded once at start-up
    FOODS_CSV_PATH = os.getenv(
        "FOODS_CSV_PATH",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "foods.csv"),
    )
    FOODS_DESCRIPTION_COLUMN = os.getenv("FOODS_DESCRIPTION_COLUMN", "Shrt_Desc")
    FOODS_ENERGY_COLUMN = os.getenv("FOODS_ENERGY_COLUMN", "Energ_Kcal")

    CORS_ORIGINS = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
