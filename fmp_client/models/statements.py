"""
Financial statement records and their growth variants
"""
from typing import List, Optional

import pandas as pd
from pydantic import Field

from .base import FMPDate, FMPModel


# ============================================================================
# FINANCIAL STATEMENTS
# ============================================================================

class StatementHeader(FMPModel):
    """Fields shared by every statement filing"""
    date: FMPDate = Field(None, description="Period end date")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    reported_currency: Optional[str] = Field(None, description="Reporting currency", alias="reportedCurrency")
    cik: Optional[str] = Field(None, description="SEC CIK")
    filling_date: FMPDate = Field(None, description="SEC filing date", alias="fillingDate")
    accepted_date: Optional[str] = Field(None, description="SEC acceptance timestamp", alias="acceptedDate")
    calendar_year: Optional[str] = Field(None, description="Calendar year", alias="calendarYear")
    period: Optional[str] = Field(None, description="Period (Q1, Q2, Q3, Q4, FY)")
    link: Optional[str] = Field(None, description="Filing index URL")
    final_link: Optional[str] = Field(None, description="Filing document URL", alias="finalLink")


class IncomeStatement(StatementHeader):
    """Income statement"""
    revenue: Optional[float] = Field(None, description="Total revenue")
    cost_of_revenue: Optional[float] = Field(None, description="Cost of revenue", alias="costOfRevenue")
    gross_profit: Optional[float] = Field(None, description="Gross profit", alias="grossProfit")
    gross_profit_ratio: Optional[float] = Field(None, description="Gross margin", alias="grossProfitRatio")
    research_and_development_expenses: Optional[float] = Field(None, description="R&D", alias="researchAndDevelopmentExpenses")
    general_and_administrative_expenses: Optional[float] = Field(None, description="G&A", alias="generalAndAdministrativeExpenses")
    selling_and_marketing_expenses: Optional[float] = Field(None, description="S&M", alias="sellingAndMarketingExpenses")
    selling_general_and_administrative_expenses: Optional[float] = Field(None, description="SG&A", alias="sellingGeneralAndAdministrativeExpenses")
    other_expenses: Optional[float] = Field(None, description="Other expenses", alias="otherExpenses")
    operating_expenses: Optional[float] = Field(None, description="Operating expenses", alias="operatingExpenses")
    cost_and_expenses: Optional[float] = Field(None, description="Costs and expenses", alias="costAndExpenses")
    interest_income: Optional[float] = Field(None, description="Interest income", alias="interestIncome")
    interest_expense: Optional[float] = Field(None, description="Interest expense", alias="interestExpense")
    depreciation_and_amortization: Optional[float] = Field(None, description="D&A", alias="depreciationAndAmortization")
    ebitda: Optional[float] = Field(None, description="EBITDA")
    ebitda_ratio: Optional[float] = Field(None, description="EBITDA margin", alias="ebitdaratio")
    operating_income: Optional[float] = Field(None, description="Operating income", alias="operatingIncome")
    operating_income_ratio: Optional[float] = Field(None, description="Operating margin", alias="operatingIncomeRatio")
    total_other_income_expenses_net: Optional[float] = Field(None, description="Other income/expenses, net", alias="totalOtherIncomeExpensesNet")
    income_before_tax: Optional[float] = Field(None, description="Pre-tax income", alias="incomeBeforeTax")
    income_before_tax_ratio: Optional[float] = Field(None, description="Pre-tax margin", alias="incomeBeforeTaxRatio")
    income_tax_expense: Optional[float] = Field(None, description="Income tax", alias="incomeTaxExpense")
    net_income: Optional[float] = Field(None, description="Net income", alias="netIncome")
    net_income_ratio: Optional[float] = Field(None, description="Net margin", alias="netIncomeRatio")
    eps: Optional[float] = Field(None, description="Earnings per share")
    eps_diluted: Optional[float] = Field(None, description="Diluted EPS", alias="epsdiluted")
    weighted_average_shs_out: Optional[float] = Field(None, description="Weighted average shares", alias="weightedAverageShsOut")
    weighted_average_shs_out_dil: Optional[float] = Field(None, description="Weighted average diluted shares", alias="weightedAverageShsOutDil")

    @classmethod
    def list_to_df(cls, statements: List['IncomeStatement']) -> pd.DataFrame:
        """Summarize income statements as a DataFrame, one row per period"""
        return pd.DataFrame([
            {
                "date": s.date,
                "period": s.period or "FY",
                "revenue": s.revenue,
                "gross_profit": s.gross_profit,
                "operating_income": s.operating_income,
                "net_income": s.net_income,
                "eps": s.eps,
                "ebitda": s.ebitda,
            }
            for s in statements
        ])


class BalanceSheet(StatementHeader):
    """Balance sheet"""
    # Assets
    cash_and_cash_equivalents: Optional[float] = Field(None, description="Cash and equivalents", alias="cashAndCashEquivalents")
    short_term_investments: Optional[float] = Field(None, description="Short-term investments", alias="shortTermInvestments")
    cash_and_short_term_investments: Optional[float] = Field(None, description="Cash and short-term investments", alias="cashAndShortTermInvestments")
    net_receivables: Optional[float] = Field(None, description="Net receivables", alias="netReceivables")
    inventory: Optional[float] = Field(None, description="Inventory")
    other_current_assets: Optional[float] = Field(None, description="Other current assets", alias="otherCurrentAssets")
    total_current_assets: Optional[float] = Field(None, description="Current assets", alias="totalCurrentAssets")
    property_plant_equipment_net: Optional[float] = Field(None, description="PP&E, net", alias="propertyPlantEquipmentNet")
    goodwill: Optional[float] = Field(None, description="Goodwill")
    intangible_assets: Optional[float] = Field(None, description="Intangibles", alias="intangibleAssets")
    goodwill_and_intangible_assets: Optional[float] = Field(None, description="Goodwill and intangibles", alias="goodwillAndIntangibleAssets")
    long_term_investments: Optional[float] = Field(None, description="Long-term investments", alias="longTermInvestments")
    tax_assets: Optional[float] = Field(None, description="Tax assets", alias="taxAssets")
    other_non_current_assets: Optional[float] = Field(None, description="Other non-current assets", alias="otherNonCurrentAssets")
    total_non_current_assets: Optional[float] = Field(None, description="Non-current assets", alias="totalNonCurrentAssets")
    other_assets: Optional[float] = Field(None, description="Other assets", alias="otherAssets")
    total_assets: Optional[float] = Field(None, description="Total assets", alias="totalAssets")

    # Liabilities
    account_payables: Optional[float] = Field(None, description="Accounts payable", alias="accountPayables")
    short_term_debt: Optional[float] = Field(None, description="Short-term debt", alias="shortTermDebt")
    tax_payables: Optional[float] = Field(None, description="Taxes payable", alias="taxPayables")
    deferred_revenue: Optional[float] = Field(None, description="Deferred revenue", alias="deferredRevenue")
    other_current_liabilities: Optional[float] = Field(None, description="Other current liabilities", alias="otherCurrentLiabilities")
    total_current_liabilities: Optional[float] = Field(None, description="Current liabilities", alias="totalCurrentLiabilities")
    long_term_debt: Optional[float] = Field(None, description="Long-term debt", alias="longTermDebt")
    deferred_revenue_non_current: Optional[float] = Field(None, description="Non-current deferred revenue", alias="deferredRevenueNonCurrent")
    deferred_tax_liabilities_non_current: Optional[float] = Field(None, description="Non-current deferred tax", alias="deferredTaxLiabilitiesNonCurrent")
    other_non_current_liabilities: Optional[float] = Field(None, description="Other non-current liabilities", alias="otherNonCurrentLiabilities")
    total_non_current_liabilities: Optional[float] = Field(None, description="Non-current liabilities", alias="totalNonCurrentLiabilities")
    other_liabilities: Optional[float] = Field(None, description="Other liabilities", alias="otherLiabilities")
    capital_lease_obligations: Optional[float] = Field(None, description="Capital leases", alias="capitalLeaseObligations")
    total_liabilities: Optional[float] = Field(None, description="Total liabilities", alias="totalLiabilities")

    # Equity
    preferred_stock: Optional[float] = Field(None, description="Preferred stock", alias="preferredStock")
    common_stock: Optional[float] = Field(None, description="Common stock", alias="commonStock")
    retained_earnings: Optional[float] = Field(None, description="Retained earnings", alias="retainedEarnings")
    accumulated_other_comprehensive_income_loss: Optional[float] = Field(None, description="AOCI", alias="accumulatedOtherComprehensiveIncomeLoss")
    other_total_stockholders_equity: Optional[float] = Field(None, description="Other equity", alias="othertotalStockholdersEquity")
    total_stockholders_equity: Optional[float] = Field(None, description="Stockholders equity", alias="totalStockholdersEquity")
    total_equity: Optional[float] = Field(None, description="Total equity", alias="totalEquity")
    total_liabilities_and_stockholders_equity: Optional[float] = Field(None, description="Liabilities and stockholders equity", alias="totalLiabilitiesAndStockholdersEquity")
    minority_interest: Optional[float] = Field(None, description="Minority interest", alias="minorityInterest")
    total_liabilities_and_total_equity: Optional[float] = Field(None, description="Liabilities and total equity", alias="totalLiabilitiesAndTotalEquity")
    total_investments: Optional[float] = Field(None, description="Total investments", alias="totalInvestments")
    total_debt: Optional[float] = Field(None, description="Total debt", alias="totalDebt")
    net_debt: Optional[float] = Field(None, description="Net debt", alias="netDebt")

    @classmethod
    def list_to_df(cls, statements: List['BalanceSheet']) -> pd.DataFrame:
        """Summarize balance sheets as a DataFrame, one row per period"""
        return pd.DataFrame([
            {
                "date": s.date,
                "period": s.period or "FY",
                "total_assets": s.total_assets,
                "total_liabilities": s.total_liabilities,
                "total_equity": s.total_equity,
                "cash": s.cash_and_cash_equivalents,
                "debt": s.total_debt,
                "net_debt": s.net_debt,
            }
            for s in statements
        ])


class CashFlowStatement(StatementHeader):
    """Cash flow statement"""
    # Operating
    net_income: Optional[float] = Field(None, description="Net income", alias="netIncome")
    depreciation_and_amortization: Optional[float] = Field(None, description="D&A", alias="depreciationAndAmortization")
    deferred_income_tax: Optional[float] = Field(None, description="Deferred income tax", alias="deferredIncomeTax")
    stock_based_compensation: Optional[float] = Field(None, description="Stock-based compensation", alias="stockBasedCompensation")
    change_in_working_capital: Optional[float] = Field(None, description="Change in working capital", alias="changeInWorkingCapital")
    accounts_receivables: Optional[float] = Field(None, description="Change in receivables", alias="accountsReceivables")
    inventory: Optional[float] = Field(None, description="Change in inventory")
    accounts_payables: Optional[float] = Field(None, description="Change in payables", alias="accountsPayables")
    other_working_capital: Optional[float] = Field(None, description="Other working capital", alias="otherWorkingCapital")
    other_non_cash_items: Optional[float] = Field(None, description="Other non-cash items", alias="otherNonCashItems")
    net_cash_provided_by_operating_activities: Optional[float] = Field(None, description="Operating cash flow", alias="netCashProvidedByOperatingActivities")

    # Investing (upstream spells "activites")
    investments_in_property_plant_and_equipment: Optional[float] = Field(None, description="PP&E investments", alias="investmentsInPropertyPlantAndEquipment")
    acquisitions_net: Optional[float] = Field(None, description="Acquisitions, net", alias="acquisitionsNet")
    purchases_of_investments: Optional[float] = Field(None, description="Investment purchases", alias="purchasesOfInvestments")
    sales_maturities_of_investments: Optional[float] = Field(None, description="Investment sales/maturities", alias="salesMaturitiesOfInvestments")
    other_investing_activities: Optional[float] = Field(None, description="Other investing", alias="otherInvestingActivites")
    net_cash_used_for_investing_activities: Optional[float] = Field(None, description="Investing cash flow", alias="netCashUsedForInvestingActivites")

    # Financing
    debt_repayment: Optional[float] = Field(None, description="Debt repayment", alias="debtRepayment")
    common_stock_issued: Optional[float] = Field(None, description="Stock issued", alias="commonStockIssued")
    common_stock_repurchased: Optional[float] = Field(None, description="Buybacks", alias="commonStockRepurchased")
    dividends_paid: Optional[float] = Field(None, description="Dividends paid", alias="dividendsPaid")
    other_financing_activities: Optional[float] = Field(None, description="Other financing", alias="otherFinancingActivites")
    net_cash_used_provided_by_financing_activities: Optional[float] = Field(None, description="Financing cash flow", alias="netCashUsedProvidedByFinancingActivities")

    # Summary
    effect_of_forex_changes_on_cash: Optional[float] = Field(None, description="FX effect", alias="effectOfForexChangesOnCash")
    net_change_in_cash: Optional[float] = Field(None, description="Net change in cash", alias="netChangeInCash")
    cash_at_end_of_period: Optional[float] = Field(None, description="Ending cash", alias="cashAtEndOfPeriod")
    cash_at_beginning_of_period: Optional[float] = Field(None, description="Beginning cash", alias="cashAtBeginningOfPeriod")
    operating_cash_flow: Optional[float] = Field(None, description="Operating cash flow", alias="operatingCashFlow")
    capital_expenditure: Optional[float] = Field(None, description="CapEx", alias="capitalExpenditure")
    free_cash_flow: Optional[float] = Field(None, description="Free cash flow", alias="freeCashFlow")

    @classmethod
    def list_to_df(cls, statements: List['CashFlowStatement']) -> pd.DataFrame:
        """Summarize cash flow statements as a DataFrame, one row per period"""
        return pd.DataFrame([
            {
                "date": s.date,
                "period": s.period or "FY",
                "operating_cf": s.net_cash_provided_by_operating_activities,
                "investing_cf": s.net_cash_used_for_investing_activities,
                "financing_cf": s.net_cash_used_provided_by_financing_activities,
                "capex": s.capital_expenditure,
                "free_cash_flow": s.free_cash_flow,
            }
            for s in statements
        ])


# ============================================================================
# GROWTH
# ============================================================================

class GrowthHeader(FMPModel):
    date: FMPDate = Field(None, description="Period end date")
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    calendar_year: Optional[str] = Field(None, description="Calendar year", alias="calendarYear")
    period: Optional[str] = Field(None, description="Period (Q1, Q2, Q3, Q4, FY)")


class IncomeStatementGrowth(GrowthHeader):
    """Period-over-period growth of income statement lines"""
    growth_revenue: Optional[float] = Field(None, alias="growthRevenue")
    growth_cost_of_revenue: Optional[float] = Field(None, alias="growthCostOfRevenue")
    growth_gross_profit: Optional[float] = Field(None, alias="growthGrossProfit")
    growth_gross_profit_ratio: Optional[float] = Field(None, alias="growthGrossProfitRatio")
    growth_research_and_development_expenses: Optional[float] = Field(None, alias="growthResearchAndDevelopmentExpenses")
    growth_general_and_administrative_expenses: Optional[float] = Field(None, alias="growthGeneralAndAdministrativeExpenses")
    growth_selling_and_marketing_expenses: Optional[float] = Field(None, alias="growthSellingAndMarketingExpenses")
    growth_other_expenses: Optional[float] = Field(None, alias="growthOtherExpenses")
    growth_operating_expenses: Optional[float] = Field(None, alias="growthOperatingExpenses")
    growth_cost_and_expenses: Optional[float] = Field(None, alias="growthCostAndExpenses")
    growth_interest_expense: Optional[float] = Field(None, alias="growthInterestExpense")
    growth_depreciation_and_amortization: Optional[float] = Field(None, alias="growthDepreciationAndAmortization")
    growth_ebitda: Optional[float] = Field(None, alias="growthEBITDA")
    growth_ebitda_ratio: Optional[float] = Field(None, alias="growthEBITDARatio")
    growth_operating_income: Optional[float] = Field(None, alias="growthOperatingIncome")
    growth_operating_income_ratio: Optional[float] = Field(None, alias="growthOperatingIncomeRatio")
    growth_total_other_income_expenses_net: Optional[float] = Field(None, alias="growthTotalOtherIncomeExpensesNet")
    growth_income_before_tax: Optional[float] = Field(None, alias="growthIncomeBeforeTax")
    growth_income_before_tax_ratio: Optional[float] = Field(None, alias="growthIncomeBeforeTaxRatio")
    growth_income_tax_expense: Optional[float] = Field(None, alias="growthIncomeTaxExpense")
    growth_net_income: Optional[float] = Field(None, alias="growthNetIncome")
    growth_net_income_ratio: Optional[float] = Field(None, alias="growthNetIncomeRatio")
    growth_eps: Optional[float] = Field(None, alias="growthEPS")
    growth_eps_diluted: Optional[float] = Field(None, alias="growthEPSDiluted")
    growth_weighted_average_shs_out: Optional[float] = Field(None, alias="growthWeightedAverageShsOut")
    growth_weighted_average_shs_out_dil: Optional[float] = Field(None, alias="growthWeightedAverageShsOutDil")


class BalanceSheetGrowth(GrowthHeader):
    """Period-over-period growth of balance sheet lines"""
    growth_cash_and_cash_equivalents: Optional[float] = Field(None, alias="growthCashAndCashEquivalents")
    growth_short_term_investments: Optional[float] = Field(None, alias="growthShortTermInvestments")
    growth_cash_and_short_term_investments: Optional[float] = Field(None, alias="growthCashAndShortTermInvestments")
    growth_net_receivables: Optional[float] = Field(None, alias="growthNetReceivables")
    growth_inventory: Optional[float] = Field(None, alias="growthInventory")
    growth_other_current_assets: Optional[float] = Field(None, alias="growthOtherCurrentAssets")
    growth_total_current_assets: Optional[float] = Field(None, alias="growthTotalCurrentAssets")
    growth_property_plant_equipment_net: Optional[float] = Field(None, alias="growthPropertyPlantEquipmentNet")
    growth_goodwill: Optional[float] = Field(None, alias="growthGoodwill")
    growth_intangible_assets: Optional[float] = Field(None, alias="growthIntangibleAssets")
    growth_long_term_investments: Optional[float] = Field(None, alias="growthLongTermInvestments")
    growth_total_non_current_assets: Optional[float] = Field(None, alias="growthTotalNonCurrentAssets")
    growth_total_assets: Optional[float] = Field(None, alias="growthTotalAssets")
    growth_account_payables: Optional[float] = Field(None, alias="growthAccountPayables")
    growth_short_term_debt: Optional[float] = Field(None, alias="growthShortTermDebt")
    growth_deferred_revenue: Optional[float] = Field(None, alias="growthDeferrredRevenue")
    growth_total_current_liabilities: Optional[float] = Field(None, alias="growthTotalCurrentLiabilities")
    growth_long_term_debt: Optional[float] = Field(None, alias="growthLongTermDebt")
    growth_total_non_current_liabilities: Optional[float] = Field(None, alias="growthTotalNonCurrentLiabilities")
    growth_total_liabilities: Optional[float] = Field(None, alias="growthTotalLiabilities")
    growth_common_stock: Optional[float] = Field(None, alias="growthCommonStock")
    growth_retained_earnings: Optional[float] = Field(None, alias="growthRetainedEarnings")
    growth_total_stockholders_equity: Optional[float] = Field(None, alias="growthTotalStockholdersEquity")
    growth_total_liabilities_and_stockholders_equity: Optional[float] = Field(None, alias="growthTotalLiabilitiesAndStockholdersEquity")
    growth_total_investments: Optional[float] = Field(None, alias="growthTotalInvestments")
    growth_total_debt: Optional[float] = Field(None, alias="growthTotalDebt")
    growth_net_debt: Optional[float] = Field(None, alias="growthNetDebt")


class CashFlowStatementGrowth(GrowthHeader):
    """Period-over-period growth of cash flow lines"""
    growth_net_income: Optional[float] = Field(None, alias="growthNetIncome")
    growth_depreciation_and_amortization: Optional[float] = Field(None, alias="growthDepreciationAndAmortization")
    growth_stock_based_compensation: Optional[float] = Field(None, alias="growthStockBasedCompensation")
    growth_change_in_working_capital: Optional[float] = Field(None, alias="growthChangeInWorkingCapital")
    growth_net_cash_provided_by_operating_activities: Optional[float] = Field(None, alias="growthNetCashProvidedByOperatingActivites")
    growth_investments_in_property_plant_and_equipment: Optional[float] = Field(None, alias="growthInvestmentsInPropertyPlantAndEquipment")
    growth_acquisitions_net: Optional[float] = Field(None, alias="growthAcquisitionsNet")
    growth_net_cash_used_for_investing_activities: Optional[float] = Field(None, alias="growthNetCashUsedForInvestingActivites")
    growth_debt_repayment: Optional[float] = Field(None, alias="growthDebtRepayment")
    growth_common_stock_repurchased: Optional[float] = Field(None, alias="growthCommonStockRepurchased")
    growth_dividends_paid: Optional[float] = Field(None, alias="growthDividendsPaid")
    growth_net_cash_used_provided_by_financing_activities: Optional[float] = Field(None, alias="growthNetCashUsedProvidedByFinancingActivities")
    growth_net_change_in_cash: Optional[float] = Field(None, alias="growthNetChangeInCash")
    growth_operating_cash_flow: Optional[float] = Field(None, alias="growthOperatingCashFlow")
    growth_capital_expenditure: Optional[float] = Field(None, alias="growthCapitalExpenditure")
    growth_free_cash_flow: Optional[float] = Field(None, alias="growthFreeCashFlow")


class FinancialGrowth(GrowthHeader):
    """Headline growth rates across all three statements"""
    revenue_growth: Optional[float] = Field(None, description="Revenue growth", alias="revenueGrowth")
    gross_profit_growth: Optional[float] = Field(None, description="Gross profit growth", alias="grossProfitGrowth")
    ebit_growth: Optional[float] = Field(None, description="EBIT growth", alias="ebitgrowth")
    operating_income_growth: Optional[float] = Field(None, description="Operating income growth", alias="operatingIncomeGrowth")
    net_income_growth: Optional[float] = Field(None, description="Net income growth", alias="netIncomeGrowth")
    eps_growth: Optional[float] = Field(None, description="EPS growth", alias="epsgrowth")
    eps_diluted_growth: Optional[float] = Field(None, description="Diluted EPS growth", alias="epsdilutedGrowth")
    weighted_average_shares_growth: Optional[float] = Field(None, description="Share count growth", alias="weightedAverageSharesGrowth")
    weighted_average_shares_diluted_growth: Optional[float] = Field(None, description="Diluted share count growth", alias="weightedAverageSharesDilutedGrowth")
    dividends_per_share_growth: Optional[float] = Field(None, description="DPS growth", alias="dividendsperShareGrowth")
    operating_cash_flow_growth: Optional[float] = Field(None, description="Operating cash flow growth", alias="operatingCashFlowGrowth")
    free_cash_flow_growth: Optional[float] = Field(None, description="FCF growth", alias="freeCashFlowGrowth")
    ten_y_revenue_growth_per_share: Optional[float] = Field(None, alias="tenYRevenueGrowthPerShare")
    five_y_revenue_growth_per_share: Optional[float] = Field(None, alias="fiveYRevenueGrowthPerShare")
    three_y_revenue_growth_per_share: Optional[float] = Field(None, alias="threeYRevenueGrowthPerShare")
    ten_y_net_income_growth_per_share: Optional[float] = Field(None, alias="tenYNetIncomeGrowthPerShare")
    five_y_net_income_growth_per_share: Optional[float] = Field(None, alias="fiveYNetIncomeGrowthPerShare")
    three_y_net_income_growth_per_share: Optional[float] = Field(None, alias="threeYNetIncomeGrowthPerShare")
    receivables_growth: Optional[float] = Field(None, description="Receivables growth", alias="receivablesGrowth")
    inventory_growth: Optional[float] = Field(None, description="Inventory growth", alias="inventoryGrowth")
    asset_growth: Optional[float] = Field(None, description="Asset growth", alias="assetGrowth")
    book_value_per_share_growth: Optional[float] = Field(None, description="BVPS growth", alias="bookValueperShareGrowth")
    debt_growth: Optional[float] = Field(None, description="Debt growth", alias="debtGrowth")
    rd_expense_growth: Optional[float] = Field(None, description="R&D growth", alias="rdexpenseGrowth")
    sga_expenses_growth: Optional[float] = Field(None, description="SG&A growth", alias="sgaexpensesGrowth")


# ============================================================================
# REPORT DATES
# ============================================================================

class FinancialReportDate(FMPModel):
    """A downloadable financial report (10-K / 10-Q) for a fiscal period"""
    symbol: Optional[str] = Field(None, description="Stock ticker symbol")
    date: Optional[str] = Field(None, description="Fiscal year")
    period: Optional[str] = Field(None, description="Period (Q1, Q2, Q3, Q4, FY)")
    link_xlsx: Optional[str] = Field(None, description="Excel report URL", alias="linkXlsx")
    link_json: Optional[str] = Field(None, description="JSON report URL", alias="linkJson")
