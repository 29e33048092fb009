"""Selection of the checks that run for one analysis."""

import logging
from collections.abc import Callable, Iterable, Mapping

from analysis.base import CheckInterface
from analysis.context import Context

logger = logging.getLogger(__name__)

# Receives the enabled ids in catalogue order, returns the ids to run
CheckHook = Callable[[list[str], Context], list[str]]


class CheckRegistry:
    """Filters a check catalogue down to the checks enabled for a run."""

    @staticmethod
    def filter_enabled_checks(
        checks: Iterable[CheckInterface],
        context: Context,
        config: Mapping[str, bool] | None = None,
        hook: CheckHook | None = None,
    ) -> list[CheckInterface]:
        """
        Apply the configuration map and the extension hook to `checks`.

        A check runs unless `config` maps its id to a falsy value; ids in
        `config` that match no check are ignored. The hook then sees the
        surviving ids and may drop some or re-enable others from the same
        catalogue. Catalogue order always wins over the hook's order.

        Args:
            checks: Full catalogue; later duplicates of an id are dropped
            context: Document under analysis, passed through to the hook
            config: Check id -> enabled
            hook: Optional callback adjusting the enabled ids

        Returns:
            Enabled checks in catalogue order
        """
        config = config or {}

        catalogue: dict[str, CheckInterface] = {}
        for check in checks:
            if check.id in catalogue:
                logger.warning(f"Duplicate check id {check.id!r} ignored")
                continue
            catalogue[check.id] = check

        enabled = [check_id for check_id in catalogue if config.get(check_id, True)]

        if hook is not None:
            adjusted = hook(list(enabled), context)
            if isinstance(adjusted, list):
                unknown = [check_id for check_id in adjusted if check_id not in catalogue]
                if unknown:
                    logger.warning(f"Check hook returned unknown ids: {unknown}")
                wanted = set(adjusted)
                enabled = [check_id for check_id in catalogue if check_id in wanted]
            else:
                logger.warning(
                    f"Check hook returned {type(adjusted).__name__}, expected list; ignoring"
                )

        return [catalogue[check_id] for check_id in enabled]
