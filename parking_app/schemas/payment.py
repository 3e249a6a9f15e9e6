# parking_app/schemas/payment.py
from pydantic import BaseModel, model_validator
from typing import Literal, Optional


class CardDetails(BaseModel):
    """Checked for completeness only. Never stored or logged."""
    card_number: str = ""
    card_name: str = ""
    expiry_date: str = ""      # MM/YY
    cvv: str = ""


class PaymentCreate(BaseModel):
    payment_mode: Literal["cash", "card", "upi"]
    card: Optional[CardDetails] = None

    @model_validator(mode="after")
    def check_card_details(self):
        if self.payment_mode == "card":
            card = self.card
            if card is None or not all(
                value.strip() for value in (card.card_number, card.card_name, card.expiry_date, card.cvv)
            ):
                raise ValueError("Please fill in all card details")
        return self
