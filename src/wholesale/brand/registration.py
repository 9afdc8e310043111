"""Brand registration: command and handler."""

import structlog
from protean import handle
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from wholesale.brand.brand import Brand
from wholesale.domain import wholesale
from wholesale.shared.errors import DuplicateKey

logger = structlog.get_logger(__name__)


@wholesale.command(part_of="Brand")
class RegisterBrand:
    name: String(required=True, max_length=100)
    minimum_order_value: Float(required=True)
    risk_free_return_premium: Float(required=True)
    country: String(max_length=100)
    description: Text()


@wholesale.command_handler(part_of=Brand)
class RegisterBrandHandler:
    @handle(RegisterBrand)
    def register_brand(self, command):
        repo = current_domain.repository_for(Brand)

        # Brand names are unique across the marketplace
        if repo.find_by_name(command.name.strip()) is not None:
            raise DuplicateKey("Brand name already exists")

        brand = Brand.register(
            name=command.name,
            minimum_order_value=command.minimum_order_value,
            risk_free_return_premium=command.risk_free_return_premium,
            country=command.country,
            description=command.description,
        )
        repo.add(brand)

        logger.info("Brand registered", brand_id=str(brand.id), name=brand.name)
        return str(brand.id)
