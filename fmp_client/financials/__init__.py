from .balance_sheet import get_balance_sheet_growth, get_balance_sheets
from .cash_flow import get_cash_flow_statement_growth, get_cash_flow_statements
from .enterprise_value import get_enterprise_values
from .growth import get_financial_growth
from .income_statement import get_income_statement_growth, get_income_statements
from .key_metrics import get_key_metrics, get_key_metrics_ttm
from .ratios import get_financial_ratios
from .reports_dates import get_financial_reports_dates
from .scores import get_financial_scores
from .segmentation import get_geographic_segmentation, get_product_segmentation

__all__ = [
    'get_income_statements', 'get_income_statement_growth',
    'get_balance_sheets', 'get_balance_sheet_growth',
    'get_cash_flow_statements', 'get_cash_flow_statement_growth',
    'get_financial_growth', 'get_financial_reports_dates',
    'get_product_segmentation', 'get_geographic_segmentation',
    'get_key_metrics', 'get_key_metrics_ttm', 'get_financial_ratios',
    'get_financial_scores', 'get_enterprise_values',
]
