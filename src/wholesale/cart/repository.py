"""Repository for the Cart aggregate."""

from wholesale.cart.cart import Cart
from wholesale.domain import wholesale


@wholesale.repository(part_of=Cart)
class CartRepository:
    def find_by_user(self, user_id: str) -> Cart | None:
        """Load the cart owned by ``user_id``, or ``None`` if the user has none yet."""
        results = self._dao.query.filter(user_id=user_id).all()
        if not results.items:
            return None
        return self.get(results.items[0].id)
