"""Tests for the ledger_summary_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import ledger_summary_cli
from src.application.use_cases.get_ledger_summary import LedgerView
from src.domain.errors import InvalidRangeError
from src.domain.models import FinanceTotals, LedgerSummary
from src.infrastructure.settings import LedgerSettings


def _view() -> LedgerView:
    return LedgerView(
        summary=LedgerSummary(
            per_owner_net={"A": Decimal("-200.00"), "B": Decimal("50.00")},
            total_owing=Decimal("200.00"),
            skipped_count=1,
        ),
        totals=FinanceTotals(
            total_income=Decimal("550.00"),
            total_expenses=Decimal("700.00"),
            net_income=Decimal("-150.00"),
            profit_margin=Decimal("-27.27"),
        ),
        accounts=[],
        transactions=(),
        owner_mode="all",
    )


def test_parse_date_warns_on_invalid_values():
    """Invalid dates are ignored with a warning."""
    logger = MagicMock()

    assert ledger_summary_cli._parse_date("2024-02-30", logger) is None
    assert ledger_summary_cli._parse_date(None, logger) is None
    assert ledger_summary_cli._parse_date("2024-02-01", logger) == date(
        2024, 2, 1
    )
    logger.warning.assert_called_once()


def test_main_prints_owner_nets_and_totals(monkeypatch, capsys):
    """The CLI runs the use case with env filters and prints the view."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, transaction_repository, logger, default_owner):
            captured["default_owner"] = default_owner

        def execute(self, criteria, owner_mode):
            captured["criteria"] = criteria
            captured["owner_mode"] = owner_mode
            return _view()

    monkeypatch.setenv("LEDGER_START_DATE", "2024-01-01")
    monkeypatch.setenv("LEDGER_END_DATE", "2024-01-31")
    monkeypatch.setenv("LEDGER_OWNER", "A")
    monkeypatch.setattr(ledger_summary_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        ledger_summary_cli,
        "build_settings",
        lambda: LedgerSettings(default_owner="Fleet Co"),
    )
    monkeypatch.setattr(
        ledger_summary_cli,
        "build_transaction_repository",
        lambda: object(),
    )
    monkeypatch.setattr(
        ledger_summary_cli,
        "GetLedgerSummaryUseCase",
        _FakeUseCase,
    )

    ledger_summary_cli.main()

    output = capsys.readouterr().out
    assert captured["default_owner"] == "Fleet Co"
    assert captured["owner_mode"] == "A"
    assert captured["criteria"].start_date == date(2024, 1, 1)
    assert captured["criteria"].end_date == date(2024, 1, 31)
    assert "A: net=-200.00" in output
    assert "Total owing: 200.00" in output
    assert "Skipped 1 invalid transactions." in output


def test_main_logs_domain_errors(monkeypatch, capsys):
    """Domain errors are logged instead of crashing the CLI."""
    logger = MagicMock()

    class _FailingUseCase:
        def __init__(self, **_kwargs):
            pass

        def execute(self, **_kwargs):
            raise InvalidRangeError(date(2024, 2, 1), date(2024, 1, 1))

    monkeypatch.delenv("LEDGER_OWNER", raising=False)
    monkeypatch.setattr(ledger_summary_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        ledger_summary_cli,
        "build_settings",
        LedgerSettings,
    )
    monkeypatch.setattr(
        ledger_summary_cli,
        "build_transaction_repository",
        lambda: object(),
    )
    monkeypatch.setattr(
        ledger_summary_cli,
        "GetLedgerSummaryUseCase",
        _FailingUseCase,
    )

    ledger_summary_cli.main()

    logger.error.assert_called_once()
    assert capsys.readouterr().out == ""
