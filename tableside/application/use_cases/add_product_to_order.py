"""
Add Product To Order Use Case.

Copies the product's current name and price onto the order line; later
catalog edits never change what the table already ordered.
"""
import logging

from tableside.application.dtos import OrderDTO
from tableside.application.mappers import OrderMapper
from tableside.application.results import Result
from tableside.domain.exceptions import DomainError
from tableside.domain.repositories import OrderRepository, ProductRepository
from tableside.domain.value_objects import OrderId, ProductId, Quantity


logger = logging.getLogger(__name__)


class AddProductToOrderUseCase:
    """Add (or merge) a product into a Draft order."""

    def __init__(
        self,
        order_repository: OrderRepository,
        product_repository: ProductRepository,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            product_repository: Repository for the menu products
        """
        self.order_repository = order_repository
        self.product_repository = product_repository

    async def execute(self, order_id: str, product_id: str, quantity: int) -> Result[OrderDTO]:
        """
        Args:
            order_id: Draft order to modify
            product_id: Product to add
            quantity: Units to add (1..100, merged with an existing line)

        Returns:
            Result with the updated order
        """
        try:
            order = await self.order_repository.get_by_id(OrderId.from_string(order_id))
            if order is None:
                return Result.fail(f"Order with ID {order_id} not found.")

            product = await self.product_repository.get_by_id(ProductId.from_string(product_id))
            if product is None:
                return Result.fail(f"Product with ID {product_id} not found.")

            if not product.is_available:
                logger.warning(f"Product {product.name} is unavailable (order {order_id})")
                return Result.fail(f"Product '{product.name}' is not available.")

            order.add_product(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=Quantity(quantity),
            )

            await self.order_repository.save(order)
            logger.info(
                f"Added {quantity} x {product.name} to order {order.id} "
                f"(total {order.total})"
            )

            return Result.ok(OrderMapper.to_dto(order))

        except DomainError as e:
            logger.warning(f"Add product to order {order_id} failed: {e}")
            return Result.fail(e.message)
