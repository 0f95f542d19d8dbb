from .earnings_call import (
    get_earnings_call_transcript, get_earnings_call_transcript_dates,
    get_earnings_call_transcripts
)

__all__ = [
    'get_earnings_call_transcript_dates', 'get_earnings_call_transcripts',
    'get_earnings_call_transcript',
]
