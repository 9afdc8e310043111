"""Product creation: command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from wholesale.brand.brand import Brand
from wholesale.domain import wholesale
from wholesale.product.product import Product
from wholesale.shared.errors import BrandNotFound, DuplicateKey

logger = structlog.get_logger(__name__)


@wholesale.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    sku: String(required=True, max_length=50)
    brand_id: Identifier(required=True)
    price_per_unit: Float(required=True)
    units_per_case: Integer(required=True)
    weight: Float(required=True)
    dimensions: Text(required=True)  # JSON: {length, width, height}
    msrp: Float(required=True)
    stock_quantity: Integer(default=0)
    description: Text()


@wholesale.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        if current_domain.repository_for(Brand).find(command.brand_id) is None:
            raise BrandNotFound()

        repo = current_domain.repository_for(Product)
        if repo.find_by_sku(command.sku) is not None:
            raise DuplicateKey("SKU already exists")

        product = Product.create(
            name=command.name,
            sku=command.sku,
            brand_id=command.brand_id,
            price_per_unit=command.price_per_unit,
            units_per_case=command.units_per_case,
            weight=command.weight,
            dimensions=json.loads(command.dimensions),
            msrp=command.msrp,
            stock_quantity=command.stock_quantity,
            description=command.description,
        )
        repo.add(product)

        logger.info("Product created", product_id=str(product.id), sku=product.sku, brand_id=str(product.brand_id))
        return str(product.id)
