from .esg import get_esg_risk_ratings, get_esg_scores, get_esg_sector_benchmarks

__all__ = ['get_esg_scores', 'get_esg_risk_ratings', 'get_esg_sector_benchmarks']
