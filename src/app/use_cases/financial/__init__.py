from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .record_payment import RecordPayment
from .financial_stats import FinancialStats
from .project_financials import ProjectFinancials

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "GetInvoice",
    "RecordPayment",
    "FinancialStats",
    "ProjectFinancials",
]
