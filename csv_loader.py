import logging
from pathlib import Path

import numpy as np
import pandas as pd

from product import Product


logger = logging.getLogger(__name__)


class CatalogLoadError(OSError):
    """The catalog file could not be located, read, or understood."""


FIELDS = ["sku", "price_retail", "price_current", "product_name", "category"]

EXACT_HEADERS = {
    "sku": "sku",
    "price_retail": "price_retail",
    "price_current": "price_current",
    "product_name": "product_name",
    "category": "category",
}

# Fallback matchers, tried in header order when no exact header exists.
PARTIAL_MATCHERS = {
    "sku": lambda h: "sku" in h,
    "price_retail": lambda h: "retail" in h or "list price" in h,
    "price_current": lambda h: "current" in h or "sale price" in h or "price" in h,
    "product_name": lambda h: "product" in h and "name" in h,
    "category": lambda h: "category" in h,
}

DISPLAY_NAMES = {
    "sku": "SKU",
    "price_retail": "Price_Retail",
    "price_current": "Price_Current",
    "product_name": "Product_Name",
    "category": "Category",
}


def _strip_quotes(value):
    return str(value).strip().strip('"').strip()


# ───────────────────────────────────────────────
# PATH RESOLUTION
# ───────────────────────────────────────────────

def resolve_csv_path(raw_path):
    """
    Turn whatever the user typed into an existing CSV path.

    Tries, in order: the path as given, the same path with a doubled
    ".csv.csv" extension fixed, the bare file name in the working directory,
    and finally the first CSV file found in the working directory.
    """
    cleaned = _strip_quotes(raw_path or "")
    path = Path(cleaned)

    if cleaned and path.is_file():
        return path

    name = path.name
    if name.lower().endswith(".csv.csv"):
        fixed = path.with_name(name[:-4])
        if fixed.is_file():
            return fixed

    if name and Path(name).is_file():
        return Path(name)

    candidates = sorted(p for p in Path(".").iterdir() if p.is_file() and p.suffix.lower() == ".csv")
    if candidates:
        logger.info("Using CSV found in working directory: %s", candidates[0].name)
        return candidates[0]

    raise CatalogLoadError(f"Could not find file: {cleaned or raw_path!r}")


# ───────────────────────────────────────────────
# COLUMN DETECTION
# ───────────────────────────────────────────────

def detect_columns(columns):
    """Return {field: header} for the five catalog fields."""
    headers = [(col, _strip_quotes(col).lower()) for col in columns]
    mapping = {}

    for field in FIELDS:
        for col, lowered in headers:
            if lowered == EXACT_HEADERS[field]:
                mapping[field] = col
                break

    claimed = set(mapping.values())
    for field in FIELDS:
        if field in mapping:
            continue
        for col, lowered in headers:
            if col not in claimed and PARTIAL_MATCHERS[field](lowered):
                mapping[field] = col
                claimed.add(col)
                break

    missing = [DISPLAY_NAMES[f] for f in FIELDS if f not in mapping]
    if missing:
        raise CatalogLoadError("Missing columns: " + ", ".join(missing))

    logger.info("Detected columns: %s", {f: mapping[f] for f in FIELDS})
    return mapping


# ───────────────────────────────────────────────
# LOADING
# ───────────────────────────────────────────────

def _read_frame(path):
    options = dict(dtype=str, keep_default_na=False, skipinitialspace=True, encoding="utf-8")
    try:
        header = pd.read_csv(path, nrows=0, **options).columns
        # extra trailing fields are dropped, never shifted into an index
        return pd.read_csv(
            path,
            usecols=list(range(len(header))),
            index_col=False,
            **options,
        )
    except pd.errors.EmptyDataError as e:
        raise CatalogLoadError(f"File is empty: {path}") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise CatalogLoadError(f"Could not read {path}: {e}") from e


def _to_prices(series):
    cleaned = series.map(_strip_quotes)
    return pd.to_numeric(cleaned, errors="coerce").fillna(0.0).to_numpy(dtype=np.float64)


def load_products(path):
    """
    Parse a catalog CSV into Products, in file order.

    Rows with missing fields or an empty SKU are skipped; prices that do not
    parse become 0.0. Duplicate SKUs are all returned, the index decides
    which one wins.
    """
    path = Path(path)
    df = _read_frame(path)
    cols = detect_columns(df.columns)
    ordered = [cols[f] for f in FIELDS]

    incomplete = df[ordered].isna().any(axis=1)
    if incomplete.any():
        logger.warning("Skipping %d malformed rows in %s", int(incomplete.sum()), path)
    df = df.loc[~incomplete, ordered]

    skus = df[cols["sku"]].map(_strip_quotes)
    empty_sku = skus == ""
    if empty_sku.any():
        logger.info("Skipping %d rows without SKU", int(empty_sku.sum()))

    df = df.loc[~empty_sku]
    skus = skus[~empty_sku]

    retail = _to_prices(df[cols["price_retail"]])
    current = _to_prices(df[cols["price_current"]])
    names = df[cols["product_name"]].map(_strip_quotes)
    categories = df[cols["category"]].map(_strip_quotes)

    products = [
        Product(sku, float(r), float(c), name, cat)
        for sku, r, c, name, cat in zip(skus, retail, current, names, categories)
    ]

    logger.info("Loaded %d products from %s", len(products), path)
    return products
