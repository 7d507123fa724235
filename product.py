from dataclasses import dataclass
from functools import total_ordering

from BST import InvalidArgument


def _clean_text(value):
    if value is None:
        return ""
    return str(value).strip()


def _clean_price(name, value):
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"{name} must be numeric, got {value!r}") from e


@total_ordering
@dataclass(frozen=True, eq=False)
class Product:
    """
    One catalog row. Identity, hashing and ordering use the SKU only, so two
    products with the same SKU are the same key to the tree no matter what
    their other fields say.
    """

    sku: str
    price_retail: float = 0.0
    price_current: float = 0.0
    product_name: str = ""
    category: str = ""

    def __post_init__(self):
        if self.sku is None or not str(self.sku).strip():
            raise InvalidArgument("SKU cannot be empty")

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "sku", str(self.sku).strip())
        object.__setattr__(self, "price_retail", _clean_price("price_retail", self.price_retail))
        object.__setattr__(self, "price_current", _clean_price("price_current", self.price_current))
        object.__setattr__(self, "product_name", _clean_text(self.product_name))
        object.__setattr__(self, "category", _clean_text(self.category))

    @classmethod
    def probe(cls, sku):
        """Key-only product used for lookups."""
        return cls(sku)

    @property
    def savings(self):
        return self.price_retail - self.price_current

    @property
    def savings_pct(self):
        if self.price_retail <= 0:
            return 0.0
        return self.savings / self.price_retail * 100

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.sku == other.sku

    def __lt__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.sku < other.sku

    def __hash__(self):
        return hash(self.sku)

    def __str__(self):
        return (
            f"SKU: {self.sku} | Name: {self.product_name} | Category: {self.category} | "
            f"Retail: ${self.price_retail:.2f} | Current: ${self.price_current:.2f}"
        )
