"""Check registry for managing the rule checks of an analysis."""
from __future__ import annotations

import logging

from aeo_scanner.audit.base import AuditContext, BaseCheck, CheckResult
from aeo_scanner.parser.document import HtmlDocument

logger = logging.getLogger(__name__)


class CheckRegistry:
    """Ordered registry of rule checks.

    Checks run in the order they were registered, and results come back in
    that same order.

    Usage:
        registry = CheckRegistry()
        registry.register(MyCheck())
        results = registry.run_all(document, context)
    """

    def __init__(self):
        self._checks: dict[str, BaseCheck] = {}

    def register(self, check: BaseCheck) -> None:
        """Register a check instance.

        Raises:
            ValueError: If a check with the same ID is already registered
        """
        if check.check_id in self._checks:
            raise ValueError(f"Check already registered: {check.check_id}")
        self._checks[check.check_id] = check

    def list_all(self) -> list[BaseCheck]:
        return list(self._checks.values())

    def run(
        self,
        check_id: str,
        document: HtmlDocument,
        context: AuditContext,
    ) -> CheckResult | None:
        """Run a specific check.

        Returns:
            CheckResult or None if the check is not registered
        """
        check = self._checks.get(check_id)
        if check is None:
            return None
        return self._run_one(check, document, context)

    def run_all(self, document: HtmlDocument, context: AuditContext) -> list[CheckResult]:
        """Run all registered checks in registration order."""
        return [
            self._run_one(check, document, context)
            for check in self._checks.values()
        ]

    @staticmethod
    def _run_one(check: BaseCheck, document: HtmlDocument, context: AuditContext) -> CheckResult:
        result = check.run(document, context)
        logger.debug(
            "%s: %d/%d (%s)",
            check.check_id,
            result.points,
            result.max_points,
            "pass" if result.passed else "fail",
        )
        return result
