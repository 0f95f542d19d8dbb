"""
Endpoint tests: each function hits the right path with the right params and
decodes a hand-built fixture into typed records.

Run with:
    pytest tests/test_endpoints.py -v
"""
from datetime import date

import pandas as pd
import pytest

import fmp_client
from fmp_client.errors import InvalidSubscriptionError, NotFoundError, UpstreamError
from fmp_client.models import (
    BalanceSheet, CompanyProfile, ETFSector, IncomeStatement, KeyMetrics, SegmentItem,
    TranscriptDate
)

V3 = "/api/v3"
V4 = "/api/v4"


# ============================================================================
# Fixtures - trimmed real payloads
# ============================================================================

PROFILE = {
    "symbol": "AAPL",
    "price": 178.72,
    "beta": 1.286802,
    "volAvg": 58405568,
    "mktCap": 2794144143933,
    "lastDiv": 0.96,
    "range": "124.17-198.23",
    "changes": -0.13,
    "companyName": "Apple Inc.",
    "currency": "USD",
    "cik": "0000320193",
    "isin": "US0378331005",
    "cusip": "037833100",
    "exchange": "NASDAQ Global Select",
    "exchangeShortName": "NASDAQ",
    "industry": "Consumer Electronics",
    "website": "https://www.apple.com",
    "ceo": "Mr. Timothy D. Cook",
    "sector": "Technology",
    "country": "US",
    "fullTimeEmployees": "164000",
    "ipoDate": "1980-12-12",
    "defaultImage": False,
    "isEtf": False,
    "isActivelyTrading": True,
    "isAdr": False,
    "isFund": False,
}

INCOME_STATEMENT = {
    "date": "2022-09-24",
    "symbol": "AAPL",
    "reportedCurrency": "USD",
    "cik": "0000320193",
    "fillingDate": "2022-10-28",
    "acceptedDate": "2022-10-27 18:01:14",
    "calendarYear": "2022",
    "period": "FY",
    "revenue": 394328000000,
    "grossProfit": 170782000000,
    "operatingIncome": 119437000000,
    "netIncome": 99803000000,
    "eps": 6.15,
    "epsdiluted": 6.11,
    "ebitda": 130541000000,
    "link": "https://www.sec.gov/Archives/edgar/data/320193/000032019322000108/0000320193-22-000108-index.htm",
    "finalLink": "https://www.sec.gov/Archives/edgar/data/320193/000032019322000108/aapl-20220924.htm",
}

ETF_INFO = {
    "symbol": "SPY",
    "assetClass": "Equity",
    "aum": 415800000000,
    "etfCompany": "SPDR",
    "expenseRatio": 0.0945,
    "inceptionDate": "1993-01-22",
    "name": "SPDR S&P 500 ETF Trust",
    "holdingsCount": 503,
    "sectorsList": [
        {"industry": "Technology", "exposure": 27.89},
        {"industry": "Healthcare", "exposure": 13.57},
    ],
}


class TestCompany:
    """company package"""

    def test_get_profile(self, fake_fmp):
        fake_fmp.respond(json=[PROFILE])
        profile = fmp_client.get_profile("AAPL")

        assert fake_fmp.last_request.url.path == f"{V3}/profile/AAPL"
        assert isinstance(profile, CompanyProfile)
        assert profile.company_name == "Apple Inc."
        assert profile.market_cap == 2794144143933
        assert profile.full_time_employees == 164000
        assert profile.ipo_date == date(1980, 12, 12)
        assert profile.is_actively_trading is True
        assert profile.description is None

    def test_get_profile_blank_fields(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "XYZ", "fullTimeEmployees": "", "ipoDate": ""}])
        profile = fmp_client.get_profile("XYZ")
        assert profile.full_time_employees is None
        assert profile.ipo_date is None

    def test_get_profile_not_found(self, fake_fmp):
        fake_fmp.respond(json=[])
        with pytest.raises(NotFoundError):
            fmp_client.get_profile("NOPE")

    def test_get_key_executives(self, fake_fmp):
        fake_fmp.respond(json=[
            {"title": "Chief Executive Officer", "name": "Mr. Timothy D. Cook", "pay": 16425933,
             "currencyPay": "USD", "gender": "male", "yearBorn": 1961, "titleSince": None},
            {"title": "Senior Vice President", "name": "Ms. Deirdre O'Brien", "pay": 5019783},
        ])
        executives = fmp_client.get_key_executives("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/key-executives/AAPL"
        assert [e.name for e in executives] == ["Mr. Timothy D. Cook", "Ms. Deirdre O'Brien"]
        assert executives[0].year_born == 1961
        assert executives[1].gender is None

    def test_get_market_cap(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2023-03-03", "marketCap": 2389000000000}])
        market_cap = fmp_client.get_market_cap("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/market-capitalization/AAPL"
        assert market_cap.date == date(2023, 3, 3)

    def test_get_historical_market_cap_params(self, fake_fmp):
        fake_fmp.respond(json=[])
        result = fmp_client.get_historical_market_cap("AAPL", {"limit": 100, "from": "2023-01-01"})
        assert result == []
        assert fake_fmp.last_request.url.path == f"{V3}/historical-market-capitalization/AAPL"
        assert fake_fmp.last_params["limit"] == "100"
        assert fake_fmp.last_params["from"] == "2023-01-01"

    def test_get_peers(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "peersList": ["LPL", "SNEJF", "PCRFY"]}])
        peers = fmp_client.get_peers("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/stock_peers"
        assert fake_fmp.last_params["symbol"] == "AAPL"
        assert peers.peers == ["LPL", "SNEJF", "PCRFY"]

    def test_get_shares_float(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "freeFloat": 99.9, "floatShares": 15.8e9,
                                "outstandingShares": 15.9e9, "date": "2023-03-06 09:00:00"}])
        shares = fmp_client.get_shares_float("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/shares_float"
        assert shares.free_float == 99.9
        assert shares.date == "2023-03-06 09:00:00"

    def test_get_company_notes(self, fake_fmp):
        fake_fmp.respond(json=[{"cik": "0000320193", "symbol": "AAPL",
                                "title": "1.000% Notes due 2022", "exchange": "NASDAQ"}])
        (note,) = fmp_client.get_company_notes("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/company-notes"
        assert note.title == "1.000% Notes due 2022"


class TestFinancials:
    """financials package"""

    def test_get_income_statements(self, fake_fmp):
        fake_fmp.respond(json=[INCOME_STATEMENT, dict(INCOME_STATEMENT, date="2021-09-25", calendarYear="2021")])
        statements = fmp_client.get_income_statements("AAPL", {"period": "annual", "limit": 2})

        assert fake_fmp.last_request.url.path == f"{V3}/income-statement/AAPL"
        assert fake_fmp.last_params["period"] == "annual"
        assert fake_fmp.last_params["limit"] == "2"
        assert [s.date for s in statements] == [date(2022, 9, 24), date(2021, 9, 25)]
        first = statements[0]
        assert first.filling_date == date(2022, 10, 28)
        assert first.accepted_date == "2022-10-27 18:01:14"
        assert first.net_income == 99803000000
        assert first.eps_diluted == 6.11
        assert first.final_link.endswith("aapl-20220924.htm")

    def test_income_statements_by_cik(self, fake_fmp):
        fake_fmp.respond(json=[])
        fmp_client.get_income_statements("0000320193")
        assert fake_fmp.last_request.url.path == f"{V3}/income-statement/0000320193"

    def test_income_statements_to_dataframe(self, fake_fmp):
        fake_fmp.respond(json=[INCOME_STATEMENT])
        df = IncomeStatement.list_to_df(fmp_client.get_income_statements("AAPL"))
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 1
        assert df.iloc[0]["revenue"] == 394328000000

    def test_get_balance_sheets(self, fake_fmp):
        fake_fmp.respond(json=[{"date": "2022-09-24", "symbol": "AAPL", "fillingDate": "2022-10-28",
                                "totalAssets": 352755000000, "totalLiabilities": 302083000000}])
        (sheet,) = fmp_client.get_balance_sheets("AAPL", {"period": "quarter"})
        assert fake_fmp.last_request.url.path == f"{V3}/balance-sheet-statement/AAPL"
        assert sheet.total_assets == 352755000000
        assert sheet.filling_date == date(2022, 10, 28)
        assert len(BalanceSheet.list_to_df([sheet])) == 1

    def test_get_cash_flow_statements(self, fake_fmp):
        fake_fmp.respond(json=[])
        assert fmp_client.get_cash_flow_statements("AAPL") == []
        assert fake_fmp.last_request.url.path == f"{V3}/cash-flow-statement/AAPL"

    @pytest.mark.parametrize("func,path", [
        ("get_income_statement_growth", "/income-statement-growth/AAPL"),
        ("get_balance_sheet_growth", "/balance-sheet-statement-growth/AAPL"),
        ("get_cash_flow_statement_growth", "/cash-flow-statement-growth/AAPL"),
        ("get_financial_growth", "/financial-growth/AAPL"),
        ("get_key_metrics", "/key-metrics/AAPL"),
        ("get_financial_ratios", "/ratios/AAPL"),
        ("get_enterprise_values", "/enterprise-values/AAPL"),
    ])
    def test_plural_v3_paths(self, fake_fmp, func, path):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022-09-24", "period": "FY"}])
        records = getattr(fmp_client, func)("AAPL", {"limit": 1})
        assert fake_fmp.last_request.url.path == f"{V3}{path}"
        assert fake_fmp.last_params["limit"] == "1"
        assert len(records) == 1
        assert records[0].date == date(2022, 9, 24)

    def test_get_financial_growth_fields(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022-09-24", "revenueGrowth": 0.0779,
                                "ebitgrowth": 0.1225}])
        (growth,) = fmp_client.get_financial_growth("AAPL")
        assert growth.revenue_growth == 0.0779
        assert growth.ebit_growth == 0.1225

    def test_get_key_metrics_to_dataframe(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022-09-24", "enterpriseValue": 2.5e12}])
        metrics = fmp_client.get_key_metrics("AAPL")
        assert metrics[0].enterprise_value == 2.5e12
        assert len(KeyMetrics.list_to_df(metrics)) == 1

    def test_get_key_metrics_ttm(self, fake_fmp):
        fake_fmp.respond(json=[{"peRatioTTM": 29.4, "marketCapTTM": 2.79e12, "roeTTM": 1.47}])
        ttm = fmp_client.get_key_metrics_ttm("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/key-metrics-ttm/AAPL"
        assert ttm.pe_ratio == 29.4
        assert ttm.roe == 1.47

    def test_get_key_metrics_ttm_params(self, fake_fmp):
        fake_fmp.respond(json=[{"peRatioTTM": 29.4}])
        fmp_client.get_key_metrics_ttm("AAPL", {"limit": 1})
        assert fake_fmp.last_params["limit"] == "1"

    def test_get_financial_scores(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "altmanZScore": 7.26, "piotroskiScore": 8}])
        scores = fmp_client.get_financial_scores("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/score"
        assert fake_fmp.last_params["symbol"] == "AAPL"
        assert scores.piotroski_score == 8

    def test_get_financial_scores_not_found(self, fake_fmp):
        fake_fmp.respond(json=[])
        with pytest.raises(NotFoundError):
            fmp_client.get_financial_scores("AAPL")

    def test_get_financial_reports_dates(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022", "period": "Q4",
                                "linkXlsx": "https://x/AAPL.xlsx", "linkJson": "https://x/AAPL.json"}])
        (report,) = fmp_client.get_financial_reports_dates("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/financial-reports-dates"
        assert report.link_json == "https://x/AAPL.json"

    def test_get_product_segmentation(self, fake_fmp):
        fake_fmp.respond(json=[{"2022-09-24": {"Mac": 40177000000, "iPhone": 205489000000}}])
        (segment,) = fmp_client.get_product_segmentation("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/revenue-product-segmentation"
        assert fake_fmp.last_params == {"symbol": "AAPL", "structure": "flat", "apikey": fake_fmp.last_params["apikey"]}
        assert segment.date == "2022-09-24"
        assert segment.items == [SegmentItem(name="Mac", value=40177000000),
                                 SegmentItem(name="iPhone", value=205489000000)]

    def test_get_geographic_segmentation(self, fake_fmp):
        fake_fmp.respond(json=[])
        assert fmp_client.get_geographic_segmentation("AAPL") == []
        assert fake_fmp.last_request.url.path == f"{V4}/revenue-geographic-segmentation"
        assert fake_fmp.last_params["structure"] == "flat"


class TestValuation:
    """valuation package"""

    def test_get_discounted_cash_flow(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2023-03-03", "dcf": 146.84, "Stock Price": 151.03}])
        dcf = fmp_client.get_discounted_cash_flow("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/discounted-cash-flow/AAPL"
        assert dcf.stock_price == 151.03
        assert dcf.date == date(2023, 3, 3)

    def test_historical_discounted_cash_flow(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022-09-24", "price": 150.43, "dcf": 147.9}])
        (dcf,) = fmp_client.get_historical_discounted_cash_flow("AAPL", {"period": "quarter"})
        assert fake_fmp.last_request.url.path == f"{V3}/historical-discounted-cash-flow-statement/AAPL"
        assert dcf.price == 150.43

    def test_historical_daily_discounted_cash_flow(self, fake_fmp):
        fake_fmp.respond(json=[])
        fmp_client.get_historical_daily_discounted_cash_flow("AAPL", {"limit": 5})
        assert fake_fmp.last_request.url.path == f"{V3}/historical-daily-discounted-cash-flow/AAPL"

    @pytest.mark.parametrize("func,path", [
        ("get_advanced_discounted_cash_flow", "/advanced_discounted_cash_flow"),
        ("get_advanced_levered_discounted_cash_flow", "/advanced_levered_discounted_cash_flow"),
    ])
    def test_advanced_discounted_cash_flow(self, fake_fmp, func, path):
        fake_fmp.respond(json=[{"year": "2023", "symbol": "AAPL", "wacc": 8.4, "costofDebt": 3.2}])
        (row,) = getattr(fmp_client, func)("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}{path}"
        assert fake_fmp.last_params["symbol"] == "AAPL"
        assert row.cost_of_debt == 3.2

    def test_get_rating(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2023-03-03", "rating": "S-", "ratingScore": 5,
                                "ratingRecommendation": "Strong Buy", "ratingDetailsDCFScore": 5}])
        rating = fmp_client.get_rating("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/rating/AAPL"
        assert rating.rating == "S-"
        assert rating.rating_details_dcf_score == 5

    def test_get_historical_rating(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2023-03-03"}, {"symbol": "AAPL", "date": "2023-03-02"}])
        ratings = fmp_client.get_historical_rating("AAPL", {"limit": 2})
        assert fake_fmp.last_request.url.path == f"{V3}/historical-rating/AAPL"
        assert [r.date for r in ratings] == [date(2023, 3, 3), date(2023, 3, 2)]


class TestAnalyst:
    """analyst package"""

    def test_get_price_targets(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "publishedDate": "2023-03-02T13:18:00.000Z",
                                "analystName": "Tim Anderson", "analystCompany": "Wolfe Research",
                                "priceTarget": 180, "priceWhenPosted": 145.91}])
        (target,) = fmp_client.get_price_targets("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/price-target"
        assert target.analyst_company == "Wolfe Research"
        assert target.price_target == 180

    def test_get_price_target_consensus(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "targetHigh": 220, "targetLow": 136,
                                "targetConsensus": 178.4, "targetMedian": 180}])
        consensus = fmp_client.get_price_target_consensus("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/price-target-consensus"
        assert consensus.target_consensus == 178.4

    def test_get_price_target_summary(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "lastMonth": 3, "lastMonthAvgPriceTarget": 181.3}])
        summary = fmp_client.get_price_target_summary("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/price-target-summary"
        assert summary.last_month == 3

    def test_get_price_targets_by_analyst(self, fake_fmp):
        fake_fmp.respond(json=[])
        fmp_client.get_price_targets_by_analyst("Tim Anderson")
        assert fake_fmp.last_request.url.path == f"{V4}/price-target-analyst-name"
        assert fake_fmp.last_params["name"] == "Tim Anderson"

    def test_get_price_targets_by_analyst_company(self, fake_fmp):
        fake_fmp.respond(json=[])
        fmp_client.get_price_targets_by_analyst_company("Barclays")
        assert fake_fmp.last_request.url.path == f"{V4}/price-target-analyst-company"
        assert fake_fmp.last_params["company"] == "Barclays"

    def test_get_price_targets_rss_feed(self, fake_fmp):
        fake_fmp.respond(json=[])
        fmp_client.get_price_targets_rss_feed({"page": 0})
        assert fake_fmp.last_request.url.path == f"{V4}/price-target-rss-feed"
        assert fake_fmp.last_params["page"] == "0"


class TestESG:
    """esg package"""

    def test_get_esg_scores(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "date": "2022-12-31 00:00:00", "environmentalScore": 66.35,
                                "socialScore": 45.0, "governanceScore": 61.7, "ESGScore": 57.68}])
        (score,) = fmp_client.get_esg_scores("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/esg-environmental-social-governance-data"
        assert score.esg_score == 57.68
        assert score.date == "2022-12-31 00:00:00"

    def test_get_esg_risk_ratings(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "year": 2022, "ESGRiskRating": "B", "industryRank": "4 out of 5"}])
        (rating,) = fmp_client.get_esg_risk_ratings("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/esg-environmental-social-governance-data-ratings"
        assert rating.esg_risk_rating == "B"

    def test_get_esg_sector_benchmarks(self, fake_fmp):
        fake_fmp.respond(json=[{"year": 2023, "sector": "Technology", "ESGScore": 55.1}])
        (benchmark,) = fmp_client.get_esg_sector_benchmarks(2023)
        assert fake_fmp.last_request.url.path == f"{V4}/esg-environmental-social-governance-sector-benchmark"
        assert fake_fmp.last_params["year"] == "2023"
        assert benchmark.sector == "Technology"


class TestSymbols:
    """symbols package"""

    @pytest.mark.parametrize("func,path", [
        ("get_symbols", "/stock/list"),
        ("get_tradable_symbols", "/available-traded/list"),
        ("get_etfs", "/etf/list"),
    ])
    def test_symbol_lists(self, fake_fmp, func, path):
        fake_fmp.respond(json=[{"symbol": "SPY", "name": "SPDR S&P 500 ETF Trust", "price": 410.2,
                                "exchange": "New York Stock Exchange Arca", "exchangeShortName": "AMEX",
                                "type": "etf"}])
        (symbol,) = getattr(fmp_client, func)()
        assert fake_fmp.last_request.url.path == f"{V3}{path}"
        assert symbol.exchange_short_name == "AMEX"


class TestETF:
    """etf package"""

    def test_get_etf(self, fake_fmp):
        fake_fmp.respond(json=[ETF_INFO])
        etf = fmp_client.get_etf("SPY")
        assert fake_fmp.last_request.url.path == f"{V4}/etf-info"
        assert fake_fmp.last_params["symbol"] == "SPY"
        assert etf.inception_date == date(1993, 1, 22)
        assert etf.expense_ratio == 0.0945
        assert etf.sectors_list == [
            ETFSector(industry="Technology", exposure=27.89),
            ETFSector(industry="Healthcare", exposure=13.57),
        ]

    def test_get_etf_without_sectors(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "GLD"}])
        assert fmp_client.get_etf("GLD").sectors_list is None

    def test_get_etf_holdings(self, fake_fmp):
        fake_fmp.respond(json=[{"asset": "AAPL", "name": "APPLE INC", "sharesNumber": 170000000,
                                "weightPercentage": 7.1, "marketValue": 2.6e10, "updated": "2023-03-03"}])
        (holding,) = fmp_client.get_etf_holdings("SPY")
        assert fake_fmp.last_request.url.path == f"{V3}/etf-holder/SPY"
        assert holding.updated == date(2023, 3, 3)
        assert holding.weight_percentage == 7.1

    def test_get_etf_stock_exposure(self, fake_fmp):
        fake_fmp.respond(json=[{"etfSymbol": "QQQ", "assetExposure": "AAPL", "sharesNumber": 1.3e8,
                                "weightPercentage": 12.2}])
        (exposure,) = fmp_client.get_etf_stock_exposure("AAPL")
        assert fake_fmp.last_request.url.path == f"{V3}/etf-stock-exposure/AAPL"
        assert exposure.etf_symbol == "QQQ"

    def test_get_etf_weightings(self, fake_fmp):
        fake_fmp.respond(json=[{"country": "United States", "weightPercentage": "98.87%"}])
        (country,) = fmp_client.get_etf_country_weightings("SPY")
        assert fake_fmp.last_request.url.path == f"{V3}/etf-country-weightings/SPY"
        assert country.weight_percentage == "98.87%"

        fake_fmp.respond(json=[{"sector": "Technology", "weightPercentage": "27.89%"}])
        (sector,) = fmp_client.get_etf_sector_weightings("SPY")
        assert fake_fmp.last_request.url.path == f"{V3}/etf-sector-weightings/SPY"
        assert sector.sector == "Technology"


class TestFilings:
    """filings package"""

    def test_get_sec_filings(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "fillingDate": "2023-02-03 00:00:00",
                                "acceptedDate": "2023-02-02 18:03:45", "cik": "0000320193",
                                "type": "10-Q", "link": "https://sec.gov/x", "finalLink": "https://sec.gov/y"}])
        (filing,) = fmp_client.get_sec_filings("AAPL", {"type": "10-Q", "page": 0})
        assert fake_fmp.last_request.url.path == f"{V3}/sec_filings/AAPL"
        assert fake_fmp.last_params["type"] == "10-Q"
        assert filing.type == "10-Q"
        assert filing.filling_date == "2023-02-03 00:00:00"

    def test_get_rss_feed(self, fake_fmp):
        fake_fmp.respond(json=[{"title": "10-Q - APPLE INC", "date": "2023-02-03 06:01:04",
                                "link": "https://sec.gov/z", "cik": "0000320193", "form_type": "10-Q",
                                "ticker": "AAPL", "done": True}])
        (item,) = fmp_client.get_rss_feed({"limit": 1, "isDone": True})
        assert fake_fmp.last_request.url.path == f"{V3}/rss_feed"
        assert fake_fmp.last_params["isDone"] == "true"
        assert item.form_type == "10-Q"
        assert item.done is True


class TestTranscripts:
    """transcripts package"""

    def test_get_transcript_dates_from_rows(self, fake_fmp):
        fake_fmp.respond(json=[[1, 2023, "2023-02-02 17:00:00"], [4, 2022, "2022-10-27 17:00:00"]])
        dates = fmp_client.get_earnings_call_transcript_dates("AAPL")
        assert fake_fmp.last_request.url.path == f"{V4}/earning_call_transcript"
        assert fake_fmp.last_params["symbol"] == "AAPL"
        assert dates == [
            TranscriptDate(quarter=1, year=2023, date="2023-02-02 17:00:00"),
            TranscriptDate(quarter=4, year=2022, date="2022-10-27 17:00:00"),
        ]

    def test_transcript_date_row_wrong_length(self, fake_fmp):
        fake_fmp.respond(json=[[1, 2023]])
        with pytest.raises(fmp_client.DecodeError):
            fmp_client.get_earnings_call_transcript_dates("AAPL")

    def test_get_earnings_call_transcripts(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "quarter": q, "year": 2022, "content": "..."} for q in (4, 3)])
        transcripts = fmp_client.get_earnings_call_transcripts("AAPL", 2022)
        assert fake_fmp.last_request.url.path == f"{V4}/batch_earning_call_transcript/AAPL"
        assert fake_fmp.last_params["year"] == "2022"
        assert [t.quarter for t in transcripts] == [4, 3]

    def test_get_earnings_call_transcript(self, fake_fmp):
        fake_fmp.respond(json=[{"symbol": "AAPL", "quarter": 3, "year": 2020,
                                "date": "2020-07-30 17:00:00", "content": "Operator: Good day"}])
        transcript = fmp_client.get_earnings_call_transcript("AAPL", 2020, 3)
        assert fake_fmp.last_request.url.path == f"{V3}/earning_call_transcript/AAPL"
        assert fake_fmp.last_params["year"] == "2020"
        assert fake_fmp.last_params["quarter"] == "3"
        assert transcript.content.startswith("Operator")

    def test_get_earnings_call_transcript_not_found(self, fake_fmp):
        fake_fmp.respond(json=[])
        with pytest.raises(NotFoundError):
            fmp_client.get_earnings_call_transcript("AAPL", 1990, 1)


class TestErrorPropagation:
    """Transport failures reach endpoint callers unchanged"""

    def test_subscription_error(self, fake_fmp):
        fake_fmp.respond(status_code=403, json={"Error Message": "Special Endpoint"})
        with pytest.raises(InvalidSubscriptionError):
            fmp_client.get_esg_scores("AAPL")

    def test_upstream_error_on_plural(self, fake_fmp):
        fake_fmp.respond(json={"Error Message": "Limit Reach"})
        with pytest.raises(UpstreamError):
            fmp_client.get_income_statements("AAPL")
