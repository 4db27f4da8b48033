# src/config/settings.py

"""Central configuration for the storefront app."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront app."""

    # --- Presentation ---
    APP_TITLE: str = "Trending Products"
    SEARCH_PLACEHOLDER: str = "Search products"
    CURRENCY_SYMBOL: str = "$"

    # --- Image fetching ---
    IMAGE_FETCH_ENABLED: bool = (
        os.getenv("STOREFRONT_FETCH_IMAGES", "1") != "0"
    )
    IMAGE_FETCH_TIMEOUT: int = 10       # Seconds before an image fetch gives up
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    IMAGE_HEADERS: dict[str, str] = {
        "Accept": (
            "image/avif,image/webp,image/apng,"
            "image/svg+xml,image/*,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "sec-fetch-dest": "image",
        "sec-fetch-mode": "no-cors",
        "sec-fetch-site": "cross-site",
    }

    # --- Animations ---
    LIKE_PULSE_DELAY: float = 0.5       # Heart pulse revert (secs)
    ADDED_FLASH_DELAY: float = 0.8      # "Added!" flash revert (secs)

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = Path(
        os.getenv("STOREFRONT_LOGS_DIR", str(BASE_DIR / "logs"))
    )

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = (
        os.getenv("STOREFRONT_CONSOLE_LEVEL", "WARNING").upper()
    )
