"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_ledger_summary import (
    GetLedgerSummaryUseCase,
    LedgerView,
)
from src.domain.constants import OWNER_MODE_ALL
from src.domain.models import LedgerSummary, Transaction
from src.domain.policies.transaction_filters import ALL, FilterCriteria
from src.infrastructure.container import (
    build_settings,
    build_transaction_repository,
)
from src.infrastructure.logging.logger import get_usage_logger

_CURRENCY_SYMBOLS = {"GBP": "£", "EUR": "€", "USD": "$"}


def _fetch_ledger_view(
    start_date: date | None,
    end_date: date | None,
    owner_mode: str,
    search: str,
    transaction_type: str,
) -> LedgerView:
    """Fetch transactions and compute the ledger for the filters."""
    settings = build_settings()
    use_case = GetLedgerSummaryUseCase(
        transaction_repository=build_transaction_repository(),
        default_owner=settings.default_owner,
    )
    criteria = FilterCriteria(
        search=search,
        start_date=start_date,
        end_date=end_date,
        type=transaction_type,
    )
    return use_case.execute(criteria=criteria, owner_mode=owner_mode)


@st.cache_data(show_spinner=False, ttl=60)
def _load_ledger_view(
    start_date: date | None,
    end_date: date | None,
    owner_mode: str,
    search: str,
    transaction_type: str,
) -> LedgerView:
    """Cached wrapper around _fetch_ledger_view."""
    return _fetch_ledger_view(
        start_date,
        end_date,
        owner_mode,
        search,
        transaction_type,
    )


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{value:,.2f} {currency_code}"
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def _get_period_start(period: str, today: date) -> date | None:
    """Return the start date for the selected period."""
    if period == "All Time":
        return None
    if period == "YTD":
        return date(today.year, 1, 1)
    if period == "MTD":
        return date(today.year, today.month, 1)
    if period == "QTD":
        quarter = (today.month - 1) // 3
        return date(today.year, quarter * 3 + 1, 1)
    return None


def _prepare_owner_chart_data(
    summary: LedgerSummary,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows of per-owner nets, largest deficit first."""
    rows = sorted(summary.per_owner_net.items(), key=lambda item: item[1])
    return [
        {
            "owner": owner,
            "net": float(net),
            "net_label": _format_currency(net, currency_code),
            "position": "owing" if net < 0 else "in credit",
        }
        for owner, net in rows
    ]


def _transaction_rows(
    transactions: Sequence[Transaction],
    currency_code: str,
) -> list[dict[str, str]]:
    return [
        {
            "Date": str(tx.date),
            "Type": str(getattr(tx.type, "value", tx.type)),
            "Category": tx.category,
            "Description": tx.description,
            "Owner": tx.vehicle_owner.name if tx.vehicle_owner else "—",
            "Amount": _format_currency(tx.amount, currency_code),
        }
        for tx in transactions
    ]


def _render_owner_chart(
    summary: LedgerSummary,
    currency_code: str,
) -> None:
    """Render a bar chart of the net position per owner."""
    data = _prepare_owner_chart_data(summary, currency_code)
    if not data:
        st.info("No transactions match the selected filters.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X("net:Q", title=f"Net ({currency_code})"),
        y=alt.Y("owner:N", sort=None, title=None),
        color=alt.Color(
            "position:N",
            scale=alt.Scale(
                domain=["owing", "in credit"],
                range=["#e76f51", "#2e7d32"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("owner:N"),
            alt.Tooltip("net_label:N"),
        ],
    )
    st.subheader("Net position by owner")
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Fleet Ledger", layout="wide")
    st.title("Fleet Ledger")

    settings = build_settings()
    period = st.sidebar.selectbox("Period", ["YTD", "MTD", "QTD", "All Time"])
    owner_mode = st.sidebar.text_input("Owner", value=OWNER_MODE_ALL)
    transaction_type = st.sidebar.selectbox(
        "Type",
        [ALL, "income", "expense"],
    )
    search = st.sidebar.text_input("Search", placeholder="Type to filter")

    today = date.today()
    start_date = _get_period_start(period, today)
    end_date = today if start_date else None
    owner_mode = owner_mode.strip() or OWNER_MODE_ALL
    get_usage_logger().info(
        f"Ledger viewed: period={period}, owner={owner_mode}, "
        f"type={transaction_type}"
    )

    view = _load_ledger_view(
        start_date,
        end_date,
        owner_mode,
        search,
        transaction_type,
    )
    currency_code = settings.currency_code

    income_col, expense_col, net_col, owing_col = st.columns(4)
    income_col.metric(
        "Income",
        _format_currency(view.totals.total_income, currency_code),
    )
    expense_col.metric(
        "Expenses",
        _format_currency(view.totals.total_expenses, currency_code),
    )
    net_col.metric(
        "Net",
        _format_currency(view.totals.net_income, currency_code),
        f"{view.totals.profit_margin:.2f}%",
    )
    owing_col.metric(
        "Total owing",
        _format_currency(view.summary.total_owing, currency_code),
    )
    if view.summary.skipped_count:
        st.warning(
            f"{view.summary.skipped_count} transactions were skipped "
            "because of invalid amounts or types."
        )

    _render_owner_chart(view.summary, currency_code)

    st.subheader("Transactions")
    st.caption(f"{len(view.transactions)} transactions shown")
    st.dataframe(
        _transaction_rows(view.transactions, currency_code),
        width="stretch",
        hide_index=True,
        height=420,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
