"""Utility registry and the helpers whose usage it records."""

from ads_lib.utils.registry import AdsUtilityRegistry
from ads_lib.utils.decorators import uses_utility
from ads_lib.utils.statement_builder import (
    BindVariable,
    BooleanValue,
    NumberValue,
    Statement,
    StatementBuilder,
    TextValue,
)
from ads_lib.utils.selector_builder import SelectorBuilder

__all__ = [
    "AdsUtilityRegistry",
    "uses_utility",
    "BindVariable",
    "BooleanValue",
    "NumberValue",
    "Statement",
    "StatementBuilder",
    "TextValue",
    "SelectorBuilder",
]
