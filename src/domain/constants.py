"""Domain constants for the finance tracker."""

ASSET_TYPE_LABELS = {
    "cash": "Cash & Savings",
    "stock": "Stocks",
    "mutual_fund": "Mutual Funds",
    "property": "Real Estate",
    "home": "Primary Home",
    "fd": "Fixed Deposits",
    "rd": "Recurring Deposits",
    "foreign_stock": "Foreign Stocks",
    "rsu": "RSUs",
    "direct_investment": "Direct Investments",
    "gold": "Gold & Precious Metals",
    "crypto": "Cryptocurrency",
    "other": "Other",
}

DEBT_TYPE_LABELS = {
    "home_loan": "Home Loan / Mortgage",
    "credit_card": "Credit Card",
    "personal": "Personal Loan",
    "other": "Other Debt",
}

RELATION_LABELS = {
    "spouse": "Spouse",
    "child": "Child",
    "parent": "Parent",
    "sibling": "Sibling",
    "grandparent": "Grandparent",
    "grandchild": "Grandchild",
    "other": "Other",
}

ASSET_TYPES = tuple(ASSET_TYPE_LABELS)
DEBT_TYPES = tuple(DEBT_TYPE_LABELS)
RELATIONS = tuple(RELATION_LABELS)

DEFAULT_CURRENCY = "INR"
SUPPORTED_CURRENCIES = ("INR", "USD", "EUR", "GBP", "CAD", "AUD")

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "C$",
    "AUD": "A$",
}

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

PAYMENT_FREQUENCIES = (
    "monthly",
    "bi-weekly",
    "weekly",
    "quarterly",
    "annually",
)


__all__ = [
    "ASSET_TYPE_LABELS",
    "DEBT_TYPE_LABELS",
    "RELATION_LABELS",
    "ASSET_TYPES",
    "DEBT_TYPES",
    "RELATIONS",
    "DEFAULT_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "CURRENCY_SYMBOLS",
    "MONTH_LABELS",
    "PAYMENT_FREQUENCIES",
]
