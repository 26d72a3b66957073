"""
Invoice actions against the real SQLite repository.
"""

import asyncio
from unittest.mock import Mock

from src.adapters.revalidation import StubRevalidationAdapter
from src.adapters.sqlite.repos import SQLiteInvoiceRepo
from src.components.invoices import (
    CREATE_FAILED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    CreateInvoiceInput,
    UpdateInvoiceInput,
    run_create,
    run_update,
)

VALID_FORM = {"customerId": "c1", "amount": "10", "status": "pending"}


def _create(form, repo, revalidator, navigator, mock_time):
    return asyncio.run(
        run_create(
            CreateInvoiceInput(form=form),
            repo=repo,
            revalidator=revalidator,
            navigator=navigator,
            time=mock_time,
        )
    )


class TestCreateWithSQLite:
    def test_half_cent_rounds_away_from_zero(
        self,
        invoice_repo: SQLiteInvoiceRepo,
        revalidator: StubRevalidationAdapter,
        mock_time: Mock,
    ) -> None:
        result = _create(
            {**VALID_FORM, "amount": "0.25"}, invoice_repo, revalidator, Mock(), mock_time
        )

        assert result.ok is True
        assert [r.amount for r in asyncio.run(invoice_repo.list_all())] == [3]

    def test_amount_beyond_integer_column_is_a_store_failure(
        self,
        invoice_repo: SQLiteInvoiceRepo,
        revalidator: StubRevalidationAdapter,
        mock_time: Mock,
    ) -> None:
        navigator = Mock()

        result = _create(
            {**VALID_FORM, "amount": "1e18"}, invoice_repo, revalidator, navigator, mock_time
        )

        assert result.message == CREATE_FAILED_MESSAGE
        assert result.errors is None
        assert revalidator.revalidated_paths == []
        navigator.redirect.assert_not_called()
        assert asyncio.run(invoice_repo.list_all()) == []

    def test_largest_float_is_a_store_failure(
        self,
        invoice_repo: SQLiteInvoiceRepo,
        revalidator: StubRevalidationAdapter,
        mock_time: Mock,
    ) -> None:
        result = _create(
            {**VALID_FORM, "amount": "1.7e308"}, invoice_repo, revalidator, Mock(), mock_time
        )

        assert result.message == CREATE_FAILED_MESSAGE


class TestUpdateWithSQLite:
    def test_amount_beyond_integer_column_is_a_store_failure(
        self,
        invoice_repo: SQLiteInvoiceRepo,
        revalidator: StubRevalidationAdapter,
        mock_time: Mock,
    ) -> None:
        _create(VALID_FORM, invoice_repo, revalidator, Mock(), mock_time)
        invoice_id = asyncio.run(invoice_repo.list_all())[0].id
        revalidator.reset()
        navigator = Mock()

        result = asyncio.run(
            run_update(
                UpdateInvoiceInput(invoice_id=invoice_id, form={**VALID_FORM, "amount": "1e17"}),
                repo=invoice_repo,
                revalidator=revalidator,
                navigator=navigator,
            )
        )

        assert result.message == UPDATE_FAILED_MESSAGE
        assert revalidator.revalidated_paths == []
        navigator.redirect.assert_not_called()
        assert asyncio.run(invoice_repo.list_all())[0].amount == 100
