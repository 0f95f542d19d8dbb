"""Get symbol lists - all symbols, tradable symbols, ETFs"""
from typing import List

from ..api import v3_url
from .._decode import fetch_many
from ..models import Symbol


def get_symbols() -> List[Symbol]:
    """Get every symbol FMP covers"""
    return fetch_many(v3_url('/stock/list'), Symbol)


def get_tradable_symbols() -> List[Symbol]:
    """Get symbols that are actively traded"""
    return fetch_many(v3_url('/available-traded/list'), Symbol)


def get_etfs() -> List[Symbol]:
    """Get every ETF symbol"""
    return fetch_many(v3_url('/etf/list'), Symbol)
