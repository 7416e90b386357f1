# -*- coding: utf-8 -*-
"""
Location catalog seed data.

Sample South Lebanon catalog used when no catalog file is configured
(Config.CATALOG_PATH).
"""

from pathlib import Path
from typing import Optional, Union

from models.location import LocationCatalog
from utils.logger import get_logger

logger = get_logger(__name__)


SOUTH_LEBANON_CATALOG = {
    "صور": {
        "villages": {
            "صور": ["101", "102", "103", "104", "105"],
            "البازورية": ["201", "202", "203"],
            "قانا": ["301", "302", "303", "304"],
            "الناقورة": ["401", "402"],
        }
    },
    "بنت جبيل": {
        "villages": {
            "بنت جبيل": ["1001", "1002", "1003", "1004"],
            "عيترون": ["1101", "1102"],
            "مارون الراس": ["1201", "1202", "1203"],
            "عيتا الشعب": ["1301", "1302", "1303"],
        }
    },
    "مرجعيون": {
        "villages": {
            "الخيام": ["2001", "2002", "2003", "2004"],
            "كفركلا": ["2101", "2102"],
            "العديسة": ["2201", "2202", "2203"],
        }
    },
    "النبطية": {
        "villages": {
            "النبطية الفوقا": ["3001", "3002", "3003"],
            "كفررمان": ["3101", "3102"],
            "يحمر الشقيف": ["3201", "3202", "3203"],
        }
    },
}


def load_catalog(path: Optional[Union[str, Path]] = None) -> LocationCatalog:
    """
    Load the location catalog.

    Args:
        path: JSON catalog file; falls back to Config.CATALOG_PATH, then to
            the seeded sample catalog

    Returns:
        LocationCatalog instance
    """
    if path is None:
        from app.config import Config
        path = Config.CATALOG_PATH

    if path:
        catalog = LocationCatalog.from_json(path)
        logger.info(f"Loaded location catalog from {path} ({len(catalog)} sectors)")
        return catalog

    logger.debug("Using seeded sample location catalog")
    return LocationCatalog(SOUTH_LEBANON_CATALOG)
