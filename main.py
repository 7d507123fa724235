import argparse
import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv

from catalog import ProductCatalog
from csv_loader import CatalogLoadError


# ───────────────────────────────────────────────
# LOAD .env (local only)
# ───────────────────────────────────────────────
if Path(".env").exists():
    load_dotenv()

DEFAULT_PAGE_SIZE = 10


def get_page_size():
    try:
        return max(1, int(os.environ.get("PAGE_SIZE", DEFAULT_PAGE_SIZE)))
    except ValueError:
        print(f"[ERROR] Invalid PAGE_SIZE {os.environ['PAGE_SIZE']!r}, using {DEFAULT_PAGE_SIZE}")
        return DEFAULT_PAGE_SIZE


def configure_logging():
    level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ============================================================
# MENU ACTIONS
# ============================================================

MENU = """
===== MAIN MENU =====
1. Search product by SKU
2. List products (ascending SKU)
3. List products (descending SKU)
4. Load another CSV file
5. Exit"""


def pick_file():
    """GUI file chooser. Returns "" when no display is available or nothing was chosen."""
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError:
        return ""

    try:
        root = tkinter.Tk()
    except tkinter.TclError:
        return ""
    root.withdraw()
    try:
        return filedialog.askopenfilename(
            title="Select product CSV file",
            filetypes=[("CSV files", "*.csv")],
        ) or ""
    finally:
        root.destroy()


def file_picker_enabled():
    return os.environ.get("CATALOG_FILE_PICKER", "").strip().lower() in ("1", "true", "yes")


def ask_path(prompt="Enter the path of the product CSV file: "):
    if file_picker_enabled():
        path = pick_file()
        if path:
            return path
        print("File picker unavailable or no file selected.")
    return input(prompt)


def load_catalog(catalog, raw_path):
    print("Loading products...")
    try:
        count = catalog.load_csv(raw_path)
    except CatalogLoadError as e:
        print(f"[ERROR] Couldn't load catalog: {e}")
        return False

    print(f"Loaded {count} products into the tree.")
    return True


def search_product(catalog):
    sku = input("\nEnter the product SKU: ").strip()
    product = catalog.find_by_key(sku)

    if product is None:
        print(f"\n[NO DATA] No product found with SKU: {sku}")
        return

    print("\n===== PRODUCT FOUND =====")
    print(product)
    print("\nPrice details:")
    print(f"- Retail price: ${product.price_retail:.2f}")
    print(f"- Current price: ${product.price_current:.2f}")
    if product.savings > 0:
        print(f"- Savings: ${product.savings:.2f} ({product.savings_pct:.2f}%)")


def list_products(catalog, ascending=True, page_size=DEFAULT_PAGE_SIZE):
    products = catalog.list_ascending() if ascending else catalog.list_descending()

    if not products:
        print("\n[NO DATA] No products loaded.")
        return

    order = "ASCENDING" if ascending else "DESCENDING"
    print(f"\n===== PRODUCTS ({order}) =====")
    print(f"Total products: {len(products)}")

    total_pages = math.ceil(len(products) / page_size)
    for page in range(1, total_pages + 1):
        print(f"\nPage {page} of {total_pages}")
        start = (page - 1) * page_size
        for i, product in enumerate(products[start:start + page_size], start=start + 1):
            print(f"{i}. {product}")

        if page < total_pages:
            answer = input("\n[N]ext page, [Q]uit to menu: ").strip().lower()
            if answer in ("q", "quit"):
                break
        else:
            input("\nPress ENTER to return to the menu...")


def run_menu(catalog, page_size=DEFAULT_PAGE_SIZE):
    while True:
        print(MENU)
        try:
            option = int(input("\nChoose an option: ").strip())
        except ValueError:
            print("[ERROR] Invalid input, enter a number.")
            continue

        if option == 1:
            search_product(catalog)
        elif option == 2:
            list_products(catalog, True, page_size)
        elif option == 3:
            list_products(catalog, False, page_size)
        elif option == 4:
            load_catalog(catalog, ask_path())
        elif option == 5:
            return
        else:
            print("[ERROR] Unknown option, try again.")


# ============================================================
# ENTRY POINT
# ============================================================

def main(argv=None):
    parser = argparse.ArgumentParser(description="Search and list a product catalog by SKU.")
    parser.add_argument("csv_path", nargs="?", help="Path to the product CSV file")
    args = parser.parse_args(argv)

    configure_logging()
    catalog = ProductCatalog()

    print("===== PRODUCT SEARCH =====")
    try:
        raw_path = args.csv_path or os.environ.get("CATALOG_CSV") or ask_path()
        if load_catalog(catalog, raw_path):
            run_menu(catalog, get_page_size())
        else:
            print("Check that the file exists and has the expected columns.")
    except (EOFError, KeyboardInterrupt):
        print()

    print("Thanks for using Product Search!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
