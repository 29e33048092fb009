"""Runs the enabled checks against a document and aggregates their verdicts."""

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from analysis.base import CheckInterface
from analysis.checks import default_checks
from analysis.context import Context
from analysis.registry import CheckHook, CheckRegistry
from analysis.result import Result, Status

logger = logging.getLogger(__name__)


class Analyzer:
    """
    Orchestrates one analysis run.

    The analyzer never mutates the checks it is given, so one instance can
    analyze many documents, from several threads at once.
    """

    def __init__(
        self,
        checks: Iterable[CheckInterface] | None = None,
        config: Mapping[str, bool] | None = None,
        hook: CheckHook | None = None,
        max_workers: int = 1,
        check_timeout: float | None = None,
    ):
        """
        Args:
            checks: Check catalogue, defaults to every built-in check
            config: Check id -> enabled, see CheckRegistry
            hook: Extension hook, see CheckRegistry
            max_workers: Threads used to run checks; 1 runs them inline
            check_timeout: Seconds a single check may take before it is
                recorded as faulted
        """
        self.checks = list(checks) if checks is not None else default_checks()
        self.config = dict(config or {})
        self.hook = hook
        self.max_workers = max(1, int(max_workers))
        self.check_timeout = check_timeout if check_timeout and check_timeout > 0 else None

    def analyze(self, context: Context) -> dict:
        """
        Run the enabled checks against `context`.

        Args:
            context: Document under analysis

        Returns:
            Dict with the overall status, one entry per executed check
            (keyed by check id, in catalogue order) and the summary counts
        """
        checks = CheckRegistry.filter_enabled_checks(
            self.checks, context, config=self.config, hook=self.hook
        )

        if self.max_workers > 1 and len(checks) > 1:
            outcomes = self._run_parallel(checks, context)
        else:
            outcomes = [self._run_isolated(check, context) for check in checks]

        entries = {}
        summary = {"pass": 0, "warn": 0, "fail": 0, "total": 0, "faulted": 0}

        for check, (result, faulted) in zip(checks, outcomes):
            entries[check.id] = {
                "id": check.id,
                "label": check.label,
                "description": check.description,
                **result.to_dict(),
            }
            summary[result.status.value] += 1
            summary["total"] += 1
            if faulted:
                summary["faulted"] += 1

        status = self.overall_status(summary)

        logger.info(
            f"Analyzed document {context.document_id}: {status.value} "
            f"(pass={summary['pass']} warn={summary['warn']} fail={summary['fail']} "
            f"faulted={summary['faulted']})"
        )

        return {"status": status.value, "checks": entries, "summary": summary}

    @staticmethod
    def overall_status(summary: Mapping[str, int]) -> Status:
        """Worst status wins; nothing executed counts as a pass."""
        if summary.get("fail"):
            return Status.FAIL
        if summary.get("warn"):
            return Status.WARN
        return Status.PASS

    # =========================================================================
    # Execution
    # =========================================================================

    def _run_isolated(self, check: CheckInterface, context: Context) -> tuple[Result, bool]:
        if self.check_timeout is None:
            return self._run_check(check, context)

        # One throwaway thread per check so a hung check cannot block the next
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"check-{check.id}")
        try:
            future = executor.submit(self._run_check, check, context)
            return self._collect(check, future)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def _run_parallel(
        self, checks: list[CheckInterface], context: Context
    ) -> list[tuple[Result, bool]]:
        # Parse up front so workers never race on the first parse
        context.dom()
        context.plain_text()

        executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="check")
        try:
            futures = [executor.submit(self._run_check, check, context) for check in checks]
            return [self._collect(check, future) for check, future in zip(checks, futures)]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def _collect(self, check: CheckInterface, future: Future) -> tuple[Result, bool]:
        try:
            return future.result(timeout=self.check_timeout)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(f"Check {check.id} timed out after {self.check_timeout}s")
            return (
                Result(
                    status=Status.WARN,
                    details={"timeout": self.check_timeout, "faulted": True},
                    message=f"Check did not finish within {self.check_timeout} seconds.",
                    weight=check.weight,
                ),
                True,
            )

    @staticmethod
    def _run_check(check: CheckInterface, context: Context) -> tuple[Result, bool]:
        """Run one check, turning any exception into a faulted warning."""
        try:
            result = check.run(context)
            if not isinstance(result, Result):
                raise TypeError(f"run() returned {type(result).__name__}, expected Result")
            return result, False
        except Exception as e:
            logger.exception(f"Check {check.id} failed: {e}")
            return (
                Result(
                    status=Status.WARN,
                    details={"error": str(e), "faulted": True},
                    message="Check could not be evaluated for this document.",
                    weight=check.weight,
                ),
                True,
            )
