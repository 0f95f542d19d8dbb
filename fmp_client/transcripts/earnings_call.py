"""Get earnings call transcripts"""
from typing import List

from ..api import v3_url, v4_url
from .._decode import fetch_many, fetch_one
from ..models import EarningsCallTranscript, TranscriptDate


def get_earnings_call_transcript_dates(symbol: str) -> List[TranscriptDate]:
    """
    List the earnings calls with a transcript

    Args:
        symbol: Stock ticker

    Returns:
        list: TranscriptDate records (quarter, year, date)
    """
    return fetch_many(v4_url('/earning_call_transcript'), TranscriptDate, {'symbol': symbol})


def get_earnings_call_transcripts(symbol: str, year: int) -> List[EarningsCallTranscript]:
    """Get every transcript of a fiscal year"""
    return fetch_many(v4_url(f'/batch_earning_call_transcript/{symbol}'), EarningsCallTranscript, {'year': year})


def get_earnings_call_transcript(symbol: str, year: int, quarter: int) -> EarningsCallTranscript:
    """
    Get the transcript of one earnings call

    Args:
        symbol: Stock ticker
        year: Fiscal year (e.g., 2020)
        quarter: Fiscal quarter (1-4)

    Raises:
        NotFoundError: No transcript for that quarter
    """
    return fetch_one(
        v3_url(f'/earning_call_transcript/{symbol}'),
        EarningsCallTranscript,
        {'year': year, 'quarter': quarter},
    )
