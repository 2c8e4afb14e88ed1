# app/ticket/categorization.py
# First rule with a keyword inside the lower-cased title wins; substring match.

from app.ticket.models import Inquiry

INQUIRY_RULES: tuple[tuple[Inquiry, tuple[str, ...]], ...] = (
    (Inquiry.SALES, ("money", "price", "refund")),
    (Inquiry.TECHNICAL, ("error", "bug", "login", "fail")),
    (Inquiry.LOGISTICS, ("ship", "order", "delivery")),
)

DEFAULT_INQUIRY = Inquiry.GENERAL


def categorize(title: str) -> Inquiry:
    text = title.lower()
    for inquiry, keywords in INQUIRY_RULES:
        if any(keyword in text for keyword in keywords):
            return inquiry
    return DEFAULT_INQUIRY


__all__ = ["INQUIRY_RULES", "DEFAULT_INQUIRY", "categorize"]
