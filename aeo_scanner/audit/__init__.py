"""Rule check framework for AEO analysis."""
from aeo_scanner.audit.base import AuditContext, BaseCheck, CheckResult, PageType
from aeo_scanner.audit.registry import CheckRegistry

__all__ = [
    "AuditContext",
    "BaseCheck",
    "CheckResult",
    "CheckRegistry",
    "PageType",
]
