"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from wholesale.domain import wholesale
from wholesale.product.product import Product, normalize_sku
from wholesale.shared.identifiers import ensure_valid_id


@wholesale.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        """Look up a product by id, returning ``None`` when it does not exist.

        Raises ``InvalidId`` when ``product_id`` is not a well-formed identifier.
        """
        identifier = ensure_valid_id(product_id)
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return None

    def find_by_sku(self, sku: str) -> Product | None:
        results = self._dao.query.filter(sku=normalize_sku(sku)).all()
        return results.items[0] if results.items else None

    def find_by_brand(self, brand_id) -> list[Product]:
        identifier = ensure_valid_id(brand_id)
        return self._dao.query.filter(brand_id=identifier).order_by("name").all().items

    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("name").all().items

    def clear(self) -> None:
        """Delete every record, one page at a time."""
        while items := self._dao.query.all().items:
            for item in items:
                self._dao.delete(item)
