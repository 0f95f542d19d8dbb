"""Get financial scores - Altman Z-score, Piotroski score"""
from ..api import v4_url
from .._decode import fetch_one
from ..models import FinancialScores


def get_financial_scores(symbol: str) -> FinancialScores:
    """
    Get Altman Z-score and Piotroski score

    Args:
        symbol: Stock ticker

    Returns:
        FinancialScores: altman_z_score, piotroski_score and their inputs
    """
    return fetch_one(v4_url('/score'), FinancialScores, {'symbol': symbol})
