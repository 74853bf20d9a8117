"""Shared constants for application use cases."""

from src.domain.constants import ASSET_TYPE_LABELS, DEBT_TYPE_LABELS

ASSET_ENTITIES = ("assets", "family_assets")
DEBT_ENTITIES = ("debts", "family_debts")

VALUE_FIELD_BY_ENTITY = {
    "assets": "value",
    "family_assets": "value",
    "debts": "balance",
    "family_debts": "balance",
}

TYPE_LABELS_BY_ENTITY = {
    "assets": ASSET_TYPE_LABELS,
    "family_assets": ASSET_TYPE_LABELS,
    "debts": DEBT_TYPE_LABELS,
    "family_debts": DEBT_TYPE_LABELS,
}


__all__ = [
    "ASSET_ENTITIES",
    "DEBT_ENTITIES",
    "VALUE_FIELD_BY_ENTITY",
    "TYPE_LABELS_BY_ENTITY",
]
