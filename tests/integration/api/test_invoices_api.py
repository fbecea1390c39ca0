"""Integration tests for Invoice API endpoints"""

import pytest
from datetime import date
from httpx import AsyncClient
from sqlmodel import select

from src.domain.invoice import Invoice, InvoiceStatus


async def fetch_invoices(db_session):
    db_session.expire_all()
    result = await db_session.execute(select(Invoice))
    return list(result.scalars().all())


async def seed_invoice(db_session, **overrides) -> Invoice:
    values = dict(customer_id="cust_1", amount=4500, status=InvoiceStatus.PENDING, date="2024-06-27")
    values.update(overrides)
    invoice = Invoice(**values)
    db_session.add(invoice)
    await db_session.commit()
    return invoice


class TestCreateInvoiceAPI:

    @pytest.mark.asyncio
    async def test_create_invoice_redirects(self, client: AsyncClient, db_session, view_cache):
        """Valid form inserts one invoice in cents and redirects to the list"""
        # Arrange
        view_cache.set("/dashboard/invoices", "stale list")

        # Act
        response = await client.post(
            "/dashboard/invoices/create",
            data={"customerId": "abc123", "amount": "45.00", "status": "pending"},
        )

        # Assert
        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard/invoices"

        invoices = await fetch_invoices(db_session)
        assert len(invoices) == 1
        assert invoices[0].customer_id == "abc123"
        assert invoices[0].amount == 4500
        assert invoices[0].status == InvoiceStatus.PENDING
        assert invoices[0].date == date.today().isoformat()
        assert view_cache.is_stale("/dashboard/invoices")

    @pytest.mark.asyncio
    async def test_create_invoice_validation_error(self, client: AsyncClient, db_session):
        """Invalid form returns field errors and writes nothing"""
        response = await client.post(
            "/dashboard/invoices/create",
            data={"customerId": "", "amount": "abc", "status": "overdue"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_FAILED"
        assert error["message"] == "Missing Fields. Failed to Create Invoice."
        assert set(error["fields"]) == {"customerId", "amount", "status"}
        assert await fetch_invoices(db_session) == []

    @pytest.mark.asyncio
    async def test_create_invoice_oversized_amount(self, client: AsyncClient, db_session):
        """Amounts too large for the cents column are a 400, not a server error"""
        response = await client.post(
            "/dashboard/invoices/create",
            data={"customerId": "abc123", "amount": "1e27", "status": "pending"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["fields"] == {"amount": ["Please enter a valid amount."]}
        assert await fetch_invoices(db_session) == []

    @pytest.mark.asyncio
    async def test_form_posts_document_only_redirect_and_errors(self, client: AsyncClient):
        """Form posts answer with 303 or an error envelope, never an empty 204"""
        response = await client.get("/openapi.json")

        paths = response.json()["paths"]
        for path in ("/dashboard/invoices/create", "/dashboard/invoices/{invoice_id}/edit", "/login"):
            responses = paths[path]["post"]["responses"]
            assert "303" in responses
            assert "204" not in responses


class TestUpdateInvoiceAPI:

    @pytest.mark.asyncio
    async def test_update_invoice_keeps_date(self, client: AsyncClient, db_session):
        invoice = await seed_invoice(db_session, date="2023-12-01")

        response = await client.post(
            f"/dashboard/invoices/{invoice.id}/edit",
            data={"customerId": "cust_2", "amount": "10.50", "status": "paid"},
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/dashboard/invoices"
        [updated] = await fetch_invoices(db_session)
        assert updated.customer_id == "cust_2"
        assert updated.amount == 1050
        assert updated.status == InvoiceStatus.PAID
        assert updated.date == "2023-12-01"

    @pytest.mark.asyncio
    async def test_update_invoice_validation_error(self, client: AsyncClient, db_session):
        invoice = await seed_invoice(db_session)

        response = await client.post(
            f"/dashboard/invoices/{invoice.id}/edit",
            data={"customerId": "cust_2", "amount": "10.50"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["message"] == "Missing Fields. Failed to Update Invoice."
        assert error["fields"] == {"status": ["Please select an invoice status."]}
        [unchanged] = await fetch_invoices(db_session)
        assert unchanged.customer_id == "cust_1"


class TestDeleteInvoiceAPI:

    @pytest.mark.asyncio
    async def test_delete_invoice(self, client: AsyncClient, db_session, view_cache):
        invoice = await seed_invoice(db_session)
        view_cache.set("/dashboard/invoices", "stale list")

        response = await client.post(f"/dashboard/invoices/{invoice.id}/delete")

        assert response.status_code == 204
        assert await fetch_invoices(db_session) == []
        assert view_cache.is_stale("/dashboard/invoices")

    @pytest.mark.asyncio
    async def test_delete_unknown_invoice_succeeds(self, client: AsyncClient, db_session):
        await seed_invoice(db_session)

        response = await client.post("/dashboard/invoices/does-not-exist/delete")

        assert response.status_code == 204
        assert len(await fetch_invoices(db_session)) == 1


class TestReadInvoicesAPI:

    @pytest.mark.asyncio
    async def test_list_reflects_mutations(self, client: AsyncClient, db_session):
        """The cached list is refreshed after a create invalidates it"""
        await seed_invoice(db_session)

        first = await client.get("/dashboard/invoices")
        await client.post(
            "/dashboard/invoices/create",
            data={"customerId": "abc123", "amount": "1", "status": "paid"},
        )
        second = await client.get("/dashboard/invoices")

        assert first.status_code == 200
        assert first.json()["total"] == 1
        assert second.json()["total"] == 2

    @pytest.mark.asyncio
    async def test_get_invoice(self, client: AsyncClient, db_session):
        invoice = await seed_invoice(db_session)

        response = await client.get(f"/dashboard/invoices/{invoice.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == invoice.id
        assert data["amount"] == 4500
        assert data["status"] == "pending"

    @pytest.mark.asyncio
    async def test_get_invoice_not_found(self, client: AsyncClient):
        response = await client.get("/dashboard/invoices/missing")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"
