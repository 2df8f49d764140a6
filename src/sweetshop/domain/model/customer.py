"""Delivery and payment details collected at checkout."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from sweetshop.domain.exceptions import ValidationError

_PHONE_RE = re.compile(r"^\d{10}$")
_PINCODE_RE = re.compile(r"^\d{6}$")


class PaymentMethod(Enum):
    CARD = "card"
    UPI = "upi"
    CASH_ON_DELIVERY = "cod"


@dataclass(frozen=True)
class CustomerDetails:
    name: str
    phone: str
    address: str
    pincode: str
    payment_method: PaymentMethod = PaymentMethod.CARD
    email: str = ""
    instructions: str = ""

    @staticmethod
    def create(
        name: str,
        phone: str,
        address: str,
        pincode: str,
        payment_method: str = "card",
        email: str = "",
        instructions: str = "",
    ) -> CustomerDetails:
        """Validate the checkout form.

        Every problem is reported at once, one per line, so the shopper
        can fix the whole form in a single pass.
        """
        problems: list[str] = []

        if not name or not name.strip():
            problems.append("Name is required")

        if not phone:
            problems.append("Phone number is required")
        elif not _PHONE_RE.match(phone):
            problems.append("Phone number must be 10 digits")

        if not address or not address.strip():
            problems.append("Address is required")

        if not pincode:
            problems.append("Pincode is required")
        elif not _PINCODE_RE.match(pincode):
            problems.append("Pincode must be 6 digits")

        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            allowed = ", ".join(m.value for m in PaymentMethod)
            problems.append(
                f"Unknown payment method '{payment_method}' (expected one of {allowed})"
            )
            method = PaymentMethod.CARD

        if problems:
            raise ValidationError("\n".join(problems))

        return CustomerDetails(
            name=name.strip(),
            phone=phone,
            address=address.strip(),
            pincode=pincode,
            payment_method=method,
            email=email.strip(),
            instructions=instructions.strip(),
        )
