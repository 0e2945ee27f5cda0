"""Load/save operations over the configured global rules directory."""

from __future__ import annotations

import logging
from pathlib import Path

from global_rules.config import ConfigRepository
from global_rules.constants import UNKNOWN_ERROR_MESSAGE
from global_rules.errors import ConfigParsingError, describe_exception
from global_rules.models import (
    ErrorType,
    OperationError,
    SyncDirection,
    SyncFailure,
    SyncRequest,
    SyncResult,
)
from global_rules.synchronizer import RulesSynchronizer
from global_rules.utils import project_rules_dir

logger = logging.getLogger(__name__)


def to_operation_error(exc: BaseException) -> OperationError:
    if isinstance(exc, ConfigParsingError):
        return OperationError(ErrorType.CONFIG_PARSING_ERROR, exc.message)
    return OperationError(
        ErrorType.OPERATION_ERROR, describe_exception(exc, UNKNOWN_ERROR_MESSAGE)
    )


def failure_from_exception(exc: BaseException) -> SyncFailure:
    return SyncFailure(errors=(to_operation_error(exc),))


class GlobalRulesService:
    def __init__(
        self,
        config_repository: ConfigRepository | None = None,
        synchronizer: RulesSynchronizer | None = None,
    ) -> None:
        self.config_repository = config_repository or ConfigRepository()
        self.synchronizer = synchronizer or RulesSynchronizer()

    def load_global_rules(self, path: str) -> SyncResult:
        return self.run(SyncRequest(direction=SyncDirection.LOAD, path=path))

    def save_global_rules(self, path: str) -> SyncResult:
        return self.run(SyncRequest(direction=SyncDirection.SAVE, path=path))

    def run(self, request: SyncRequest) -> SyncResult:
        try:
            config = self.config_repository.load()
        except ConfigParsingError as exc:
            logger.warning("%s aborted: %s", request.direction.value, exc.message)
            return failure_from_exception(exc)

        source_dir, target_dir = self.resolve_dirs(request, config.source_dir)
        logger.info(
            "%s global rules: %s -> %s", request.direction.value, source_dir, target_dir
        )
        return self.synchronizer.sync(source_dir, target_dir)

    @staticmethod
    def resolve_dirs(request: SyncRequest, global_dir: Path) -> tuple[Path, Path]:
        project_dir = project_rules_dir(request.project_dir)
        if request.direction == SyncDirection.LOAD:
            return global_dir, project_dir
        return project_dir, global_dir
