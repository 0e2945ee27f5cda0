import logging
import shutil
import stat
from pathlib import Path

from global_rules.constants import GLOBAL_RULE_PREFIX, UNKNOWN_ERROR_MESSAGE
from global_rules.errors import describe_exception
from global_rules.models import (
    ErrorType,
    OperationError,
    SyncFailure,
    SyncResult,
    SyncSuccess,
)

logger = logging.getLogger(__name__)


class RulesSynchronizer:
    """Copies global rule files from one flat directory into another.

    Matching entries are processed in name order. A failure on one file is
    recorded and the remaining files are still attempted; the target is
    merged into, never cleared.
    """

    def __init__(self, prefix: str = GLOBAL_RULE_PREFIX) -> None:
        self.prefix = prefix

    def sync(self, source_dir: Path, target_dir: Path) -> SyncResult:
        if not source_dir.exists():
            return SyncFailure(
                errors=(
                    OperationError(
                        ErrorType.OPERATION_ERROR,
                        f"Source directory does not exist: {source_dir}",
                    ),
                )
            )

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            names = self._matching_names(source_dir)
        except Exception as exc:
            logger.warning("Sync %s -> %s failed: %s", source_dir, target_dir, exc)
            return SyncFailure(
                errors=(
                    OperationError(
                        ErrorType.OPERATION_ERROR,
                        describe_exception(exc, "Unknown error occurred"),
                    ),
                )
            )

        if not names:
            logger.info("No %s* files in %s", self.prefix, source_dir)
            return SyncSuccess()

        errors: list[OperationError] = []
        copied = 0
        for name in names:
            try:
                if self._copy_entry(source_dir / name, target_dir / name):
                    copied += 1
            except Exception as exc:
                errors.append(
                    OperationError(
                        ErrorType.OPERATION_ERROR,
                        f"Failed to copy {name}: {describe_exception(exc, UNKNOWN_ERROR_MESSAGE)}",
                    )
                )

        logger.info(
            "Copied %d of %d %s* files from %s to %s (%d failed)",
            copied,
            len(names),
            self.prefix,
            source_dir,
            target_dir,
            len(errors),
        )
        if errors:
            return SyncFailure(errors=tuple(errors))
        return SyncSuccess()

    def _matching_names(self, source_dir: Path) -> list[str]:
        return sorted(
            child.name for child in source_dir.iterdir() if child.name.startswith(self.prefix)
        )

    @staticmethod
    def _copy_entry(source: Path, target: Path) -> bool:
        mode = source.stat().st_mode
        if not stat.S_ISREG(mode):
            logger.debug("Skipping non-regular entry %s", source)
            return False
        shutil.copyfile(source, target)
        logger.debug("Copied %s -> %s", source, target)
        return True
