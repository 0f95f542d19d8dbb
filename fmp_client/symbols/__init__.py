from .symbols import get_etfs, get_symbols, get_tradable_symbols

__all__ = ['get_symbols', 'get_tradable_symbols', 'get_etfs']
