"""Financial API Routes

Invoices, payments and financial reporting.
"""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.invoice_line_repository import SqlAlchemyInvoiceLineRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.payment_repository import SqlAlchemyPaymentRepository
from src.adapter.services.sql_executor import SqlAlchemySqlExecutor
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.auth import get_current_role, require_capability
from src.api.error import ClientError
from src.api.responses import paginated_response, success_response
from src.api.schemas.financial_request import (
    InvoiceRequestSchema,
    InvoiceUpdateRequestSchema,
    PaymentRequestSchema,
)
from src.app.resources import INVOICES, PAYMENTS
from src.app.services.access_control import Action
from src.app.services.identifier_generator import EntityIdentifierGenerator
from src.app.use_cases.financial import (
    CreateInvoice,
    DeleteInvoice,
    FinancialStats,
    GetInvoice,
    ProjectFinancials,
    RecordPayment,
    UpdateInvoice,
)
from src.app.use_cases.financial.dtos import (
    CreateInvoiceCommandDTO,
    RecordPaymentCommandDTO,
    UpdateInvoiceCommandDTO,
)
from src.app.use_cases.resources import ListResources
from src.depends import build_list_executor, get_session

router = APIRouter(
    prefix="/financial",
    tags=["Financial"],
    dependencies=[Depends(get_current_role)],
)


@router.get("/invoices", status_code=status.HTTP_200_OK)
async def list_invoices(request: Request, session: AsyncSession = Depends(get_session)):
    """
    List invoices with project name.

    **Query parameters:**
    - `page`, `limit`: pagination (defaults 1 and 10)
    - `sortBy`: id, invoice_number, date, due_date, amount, status, created_at
    - `sortOrder`: ASC or DESC
    - `status`, `project_id`: exact-match filters
    - `search`: matches invoice number, project name or client
    """
    list_executor = build_list_executor(session, request.app.state.config)
    result = await ListResources(list_executor).execute(INVOICES, dict(request.query_params))
    if result.is_err():
        raise ClientError(result.error)
    return paginated_response(result.value, "Invoices retrieved successfully")


@router.get("/invoices/{invoice_id}", status_code=status.HTTP_200_OK)
async def get_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    use_case = GetInvoice(
        SqlAlchemySqlExecutor(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(invoice_id)
    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Invoice retrieved successfully")


@router.post(
    "/invoices",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_capability(Action.INVOICE_CREATE))],
)
async def create_invoice(
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice with its line items.

    The amount is the sum of quantity * rate over the items; the invoice
    number (INV-YYYY-NNN) is assigned server-side and the status starts as
    Pending. Header and items are written in one transaction.

    **Returns:**
    - 201: Invoice created
    - 400: Invalid request body
    - 500: Write failed, nothing persisted
    """
    # Create UnitOfWork and repositories
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    invoice_line_repo = SqlAlchemyInvoiceLineRepository(session)
    id_generator = EntityIdentifierGenerator(SqlAlchemySqlExecutor(session))

    # Convert request schema to command DTO
    command = CreateInvoiceCommandDTO(**request.model_dump())

    # Execute use case
    use_case = CreateInvoice(uow, invoice_repo, invoice_line_repo, id_generator)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Invoice created successfully")


@router.put(
    "/invoices/{invoice_id}",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_capability(Action.INVOICE_UPDATE))],
)
async def update_invoice(
    invoice_id: int,
    request: InvoiceUpdateRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update an invoice header and replace its line items.

    **Returns:**
    - 200: Invoice updated
    - 404: Invoice not found
    - 500: Write failed, invoice unchanged
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    invoice_line_repo = SqlAlchemyInvoiceLineRepository(session)

    command = UpdateInvoiceCommandDTO(invoice_id=invoice_id, **request.model_dump())

    use_case = UpdateInvoice(uow, invoice_repo, invoice_line_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Invoice updated successfully")


@router.delete(
    "/invoices/{invoice_id}",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_capability(Action.INVOICE_DELETE))],
)
async def delete_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    """Delete an invoice with its line items and payments."""
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceLineRepository(session),
        SqlAlchemyPaymentRepository(session),
    )
    result = await use_case.execute(invoice_id)
    if result.is_err():
        raise ClientError(result.error)
    return success_response(None, "Invoice deleted successfully")


@router.get("/payments", status_code=status.HTTP_200_OK)
async def list_payments(request: Request, session: AsyncSession = Depends(get_session)):
    """
    List payments with invoice number and client.

    **Query parameters:** `page`, `limit`, `sortBy`, `sortOrder`, `method`,
    `invoice_id`, `search` (reference or invoice number).
    """
    list_executor = build_list_executor(session, request.app.state.config)
    result = await ListResources(list_executor).execute(PAYMENTS, dict(request.query_params))
    if result.is_err():
        raise ClientError(result.error)
    return paginated_response(result.value, "Payments retrieved successfully")


@router.post(
    "/payments",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_capability(Action.PAYMENT_CREATE))],
)
async def record_payment(
    request: PaymentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Record a payment against an invoice.

    When payments to date cover the invoice amount the invoice is marked
    Paid in the same transaction.

    **Returns:**
    - 201: Payment recorded
    - 404: Invoice not found
    - 500: Write failed, nothing persisted
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    payment_repo = SqlAlchemyPaymentRepository(session)
    id_generator = EntityIdentifierGenerator(SqlAlchemySqlExecutor(session))

    command = RecordPaymentCommandDTO(**request.model_dump())

    use_case = RecordPayment(uow, invoice_repo, payment_repo, id_generator)
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Payment recorded successfully")


@router.get("/stats", status_code=status.HTTP_200_OK)
async def financial_stats(session: AsyncSession = Depends(get_session)):
    result = await FinancialStats(SqlAlchemySqlExecutor(session)).execute()
    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Financial statistics retrieved successfully")


@router.get("/projects/{project_id}", status_code=status.HTTP_200_OK)
async def project_financials(project_id: int, session: AsyncSession = Depends(get_session)):
    result = await ProjectFinancials(SqlAlchemySqlExecutor(session)).execute(project_id)
    if result.is_err():
        raise ClientError(result.error)
    return success_response(result.value, "Project financials retrieved successfully")
