from BST import BST
from csv_loader import load_products, resolve_csv_path
from product import Product


class ProductCatalog:
    """SKU-keyed product index backed by a BST."""

    def __init__(self):
        self._tree = BST()
        self.source = None

    def load_from(self, products):
        """Replace the contents with `products`; later duplicates win."""
        self._tree.clear()
        for product in products:
            self._tree.insert(product)
        return self._tree.size()

    def load_csv(self, raw_path):
        # parse before clearing so a bad file keeps the current catalog
        path = resolve_csv_path(raw_path)
        products = load_products(path)
        count = self.load_from(products)
        self.source = path
        return count

    def find_by_key(self, key):
        if key is None or not str(key).strip():
            return None
        return self._tree.search(Product.probe(key))

    def list_ascending(self):
        return list(self._tree.ascending())

    def list_descending(self):
        return list(self._tree.descending())

    def size(self):
        return self._tree.size()

    def is_empty(self):
        return self._tree.is_empty()

    def __len__(self):
        return self._tree.size()
