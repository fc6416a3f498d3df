"""
Quotation policy: the invoker, the result mapper and the service tying the
pipeline together.
"""
from .quotation_service import QuotationService

__all__ = ["QuotationService"]
