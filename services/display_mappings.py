# -*- coding: utf-8 -*-
"""
Centralized display mappings for type/choice values (DRY).

Each function maps a stored value to its Arabic label, falling back to
"not specified" for unknown values. Options functions return
(value, label) pairs in catalog order for select controls.
"""

from typing import List, Tuple

from models.submission import EntryVariant
from models.unit import BuildingType, SectionType, Direction
from services.translation_manager import tr, _translator


def _label(prefix: str, key) -> str:
    """Translate '<prefix>.<value>', or 'not specified'."""
    value = getattr(key, "value", key)
    if value is None or value == "":
        return tr("mapping.not_specified")
    tr_key = f"{prefix}.{value}"
    if _translator.has_key(tr_key):
        return tr(tr_key)
    return tr("mapping.not_specified")


# ============ Building Type ============

def get_building_type_display(type_key) -> str:
    return _label("mapping.building_type", type_key)


def get_building_type_options() -> List[Tuple[str, str]]:
    return [(t.value, get_building_type_display(t)) for t in BuildingType]


# ============ Section Type ============

def get_section_type_display(type_key) -> str:
    return _label("mapping.section_type", type_key)


def get_section_type_options() -> List[Tuple[str, str]]:
    return [(t.value, get_section_type_display(t)) for t in SectionType]


# ============ Direction ============

def get_direction_display(direction_key) -> str:
    return _label("mapping.direction", direction_key)


def get_direction_options() -> List[Tuple[str, str]]:
    return [(d.value, get_direction_display(d)) for d in Direction]


# ============ Entry Variant ============

def get_variant_display(variant) -> str:
    return _label("variant", variant)


def get_variant_options() -> List[Tuple[str, str]]:
    return [(v.value, get_variant_display(v)) for v in EntryVariant]


# ============ Yes / No ============

def get_yes_no_display(value: bool) -> str:
    return tr("common.yes") if value else tr("common.no")
