"""Application service: Get Cart use case (query).

Returns the dealer user's cart, creating it on first use, with every line
priced live through the bulk path.  Nothing about price is stored on the
cart, so what the user sees always reflects current bands and entitlements.
"""

from __future__ import annotations

from partsportal.application.dto import CartDTO, CartItemDTO
from partsportal.domain.exceptions import ProductNotFoundError
from partsportal.domain.model.cart import Cart
from partsportal.domain.model.product import Product
from partsportal.domain.model.value_objects import Money
from partsportal.domain.repository.unit_of_work import UnitOfWork
from partsportal.domain.service.pricing import PriceResolutionEngine, PriceResult


class GetCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, dealer_user_id: str, dealer_account_id: str) -> CartDTO:
        with self._uow:
            cart = self._uow.carts.get_or_create(dealer_user_id, dealer_account_id)
            products = {
                item.product_id: self._uow.catalog.get_product(item.product_id)
                for item in cart.items
            }
            codes = [p.product_code for p in products.values() if p is not None]
            engine = PriceResolutionEngine(self._uow.catalog)
            prices = engine.resolve_prices(dealer_account_id, codes)
            # get_or_create may have inserted the cart row
            self._uow.commit()

        return self._to_dto(cart, products, prices)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(
        cart: Cart,
        products: dict[str, Product | None],
        prices: dict[str, PriceResult],
    ) -> CartDTO:
        items: list[CartItemDTO] = []
        subtotal = Money.zero()

        for item in cart.items:
            product = products.get(item.product_id)
            if product is None:
                items.append(
                    CartItemDTO(
                        id=item.id,
                        product_id=item.product_id,
                        product_code=None,
                        description=None,
                        part_type=None,
                        quantity=item.quantity.value,
                        unit_price=None,
                        line_total=None,
                        band_code=None,
                        minimum_price_applied=False,
                        available=False,
                        reason=ProductNotFoundError.code,
                    )
                )
                continue

            price = prices[product.product_code]
            line_total = None
            if price.available:
                line_total = price.unit_price * item.quantity.value
                subtotal = subtotal + line_total

            items.append(
                CartItemDTO(
                    id=item.id,
                    product_id=item.product_id,
                    product_code=product.product_code,
                    description=product.description,
                    part_type=product.part_type.value,
                    quantity=item.quantity.value,
                    unit_price=str(price.unit_price) if price.available else None,
                    line_total=str(line_total) if line_total is not None else None,
                    band_code=price.band_code,
                    minimum_price_applied=price.minimum_price_applied,
                    available=price.available,
                    reason=price.error_code,
                )
            )

        return CartDTO(
            id=cart.id,
            dealer_user_id=cart.dealer_user_id,
            dealer_account_id=cart.dealer_account_id,
            items=items,
            item_count=cart.total_quantity,
            subtotal=str(subtotal),
        )
