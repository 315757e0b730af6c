"""CLI adapter to detect and optionally repair drifted invoice totals."""

import os

from src.application.use_cases.recompute_invoices import (
    RecomputeInvoicesUseCase,
)
from src.infrastructure.container import (
    build_invoice_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes"}


def main() -> None:
    """Run the invoice recompute use case."""
    logger = get_app_logger()
    settings = build_settings()
    apply = _parse_flag(os.getenv("INVOICE_RECOMPUTE_APPLY"))
    use_case = RecomputeInvoicesUseCase(
        invoice_repository=build_invoice_repository(),
        logger=logger,
        vat_rate=settings.vat_rate,
    )
    report = use_case.execute(apply=apply)

    print(
        f"Checked {report.checked_count} invoices: "
        f"drifted={len(report.drifted)}, "
        f"invalid={len(report.invalid_ids)}, "
        f"updated={report.updated_count}"
    )
    for item in report.drifted:
        fields = ", ".join(
            f"{drift.field} {drift.stored} -> {drift.expected}"
            for drift in item.drifts
        )
        print(f"{item.invoice_id}: {fields}")
    for invoice_id in report.invalid_ids:
        print(f"{invoice_id}: invalid inputs, skipped")


if __name__ == "__main__":  # pragma: no cover
    main()
