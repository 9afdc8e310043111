"""Repository for the Brand aggregate."""

from protean.exceptions import ObjectNotFoundError

from wholesale.brand.brand import Brand
from wholesale.domain import wholesale
from wholesale.shared.identifiers import ensure_valid_id


@wholesale.repository(part_of=Brand)
class BrandRepository:
    def find(self, brand_id) -> Brand | None:
        """Look up a brand by id, returning ``None`` when it does not exist.

        Raises ``InvalidId`` when ``brand_id`` is not a well-formed identifier.
        """
        identifier = ensure_valid_id(brand_id)
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return None

    def find_by_name(self, name: str) -> Brand | None:
        results = self._dao.query.filter(name=name).all()
        return results.items[0] if results.items else None

    def list_all(self) -> list[Brand]:
        return self._dao.query.order_by("name").all().items

    def clear(self) -> None:
        """Delete every record, one page at a time."""
        while items := self._dao.query.all().items:
            for item in items:
                self._dao.delete(item)
