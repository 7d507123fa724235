import pytest

from catalog import ProductCatalog
from csv_loader import CatalogLoadError
from product import Product


def skus(products):
    return [p.sku for p in products]


def test_example_load_and_upsert():
    catalog = ProductCatalog()
    catalog.load_from([
        Product("SKU002", 20, 18, "Two", "B"),
        Product("SKU001", 10, 9, "One", "A"),
        Product("SKU003", 30, 25, "Three", "C"),
    ])
    assert skus(catalog.list_ascending()) == ["SKU001", "SKU002", "SKU003"]
    assert skus(catalog.list_descending()) == ["SKU003", "SKU002", "SKU001"]
    assert catalog.size() == 3

    catalog.load_from(catalog.list_ascending() + [Product("SKU001", 99, 50, "New One", "Z")])
    assert catalog.size() == 3
    found = catalog.find_by_key("SKU001")
    assert found.product_name == "New One"
    assert found.price_retail == 99.0


def test_later_duplicates_win():
    catalog = ProductCatalog()
    count = catalog.load_from([Product("A", product_name="first"), Product("A", product_name="second")])
    assert count == 1
    assert catalog.find_by_key("A").product_name == "second"


def test_load_replaces_previous_contents():
    catalog = ProductCatalog()
    catalog.load_from([Product("OLD")])
    catalog.load_from([Product("NEW")])
    assert catalog.find_by_key("OLD") is None
    assert skus(catalog.list_ascending()) == ["NEW"]


@pytest.mark.parametrize("key", [None, "", "   "])
def test_blank_key_lookup_returns_none(key):
    catalog = ProductCatalog()
    catalog.load_from([Product("A")])
    assert catalog.find_by_key(key) is None


def test_lookup_trims_key():
    catalog = ProductCatalog()
    catalog.load_from([Product("A1")])
    assert catalog.find_by_key("  A1 ").sku == "A1"


def test_empty_catalog():
    catalog = ProductCatalog()
    assert catalog.is_empty()
    assert len(catalog) == 0
    assert catalog.list_ascending() == []
    assert catalog.list_descending() == []
    assert catalog.find_by_key("X") is None


def test_load_csv(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(
        "SKU,Price_Retail,Price_Current,Product_Name,Category\n"
        "B2,10,8,Bowl,Kitchen\n"
        "A1,5,5,Apron,Kitchen\n"
        "B2,12,9,Big Bowl,Kitchen\n",
        encoding="utf-8",
    )
    catalog = ProductCatalog()
    assert catalog.load_csv(str(path)) == 2
    assert catalog.source == path
    assert skus(catalog.list_ascending()) == ["A1", "B2"]
    assert catalog.find_by_key("B2").product_name == "Big Bowl"


def test_failed_load_keeps_catalog(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    catalog = ProductCatalog()
    catalog.load_from([Product("KEEP")])

    with pytest.raises(CatalogLoadError):
        catalog.load_csv(str(tmp_path / "missing.csv"))

    assert catalog.find_by_key("KEEP") is not None
    assert catalog.size() == 1
