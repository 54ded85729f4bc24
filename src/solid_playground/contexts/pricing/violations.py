"""Discount calculation that branches on a kind and must be edited for every new discount."""


class SwitchDiscountCalculator:
    def calculate_discount(self, discount_kind: str, amount: float) -> float:
        if discount_kind == "seasonal":
            return amount * 0.1
        elif discount_kind == "loyalty":
            return amount * 0.15
        elif discount_kind == "none":
            return 0.0
        # an unhandled kind silently gets no discount
        return 0.0
