"""Import orchestrator: drives the pipeline across all targets of a container."""

import logging
from enum import Enum
from typing import AsyncContextManager, Callable, Optional

from ..errors import PageFetchError
from ..parsing.table import TableReader
from ..schema.models import DataContainer, ImportTarget, TargetKind
from ..sheets.client import SheetsCsvClient, build_page_url
from .assembler import RecordAssembler
from .binder import SchemaBinder
from .progress import ProgressState

logger = logging.getLogger(__name__)

PHASES_PER_TARGET = 3

CompletionCallback = Callable[[DataContainer], None]
ClientFactory = Callable[[], AsyncContextManager]


class ImportState(str, Enum):
    """Lifecycle of an import run."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class ImportOrchestrator:
    """
    Populates a container from its sheet document, one target at a time.

    For every target the page is downloaded (the only await), read into
    headers and rows, bound to the element type and assembled into records,
    which are then written into the container. Progress advances by a third
    of the target's share after each of these phases.

    Cancellation is cooperative: abort() is honoured between targets, never
    in the middle of one.
    """

    def __init__(
        self,
        container: DataContainer,
        targets: Optional[list[ImportTarget]] = None,
        client_factory: Optional[ClientFactory] = None,
        table_reader: Optional[TableReader] = None,
        binder: Optional[SchemaBinder] = None,
        assembler: Optional[RecordAssembler] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            container: Container to populate; its document_id selects the document
            targets: Targets to import (discovered from the container type if not provided)
            client_factory: Returns an async context manager exposing fetch(url)
            table_reader: Reader for page text (created if not provided)
            binder: Header binder (created if not provided)
            assembler: Record assembler (created if not provided)
        """
        self.container = container
        self.targets = targets if targets is not None else type(container).import_targets()
        self.client_factory = client_factory or SheetsCsvClient
        self.table_reader = table_reader or TableReader()
        self.binder = binder or SchemaBinder()
        self.assembler = assembler or RecordAssembler()

        self.progress = ProgressState()
        self.state = ImportState.IDLE
        self._abort_requested = False
        self._completion_callbacks: list[CompletionCallback] = []

    @property
    def document_id(self) -> str:
        return self.container.document_id

    @property
    def abort_requested(self) -> bool:
        return self._abort_requested

    def abort(self):
        """Ask the run to stop before the next target starts."""
        self._abort_requested = True

    def on_complete(self, callback: CompletionCallback):
        """Register a callback invoked with the container when every target has been processed."""
        self._completion_callbacks.append(callback)

    async def run(self) -> ImportState:
        """
        Import every target in declaration order.

        A page that cannot be downloaded aborts the run; targets already
        written keep their data. Nothing is raised for per-target or per-cell
        problems, they are logged instead.

        Returns:
            The final state, COMPLETED or ABORTED
        """
        if self.state == ImportState.RUNNING:
            raise RuntimeError("Import is already running")

        self._abort_requested = False
        self.progress.reset()
        self.state = ImportState.RUNNING
        logger.info(
            f"Starting import of {len(self.targets)} targets from document {self.document_id}"
        )

        processed = 0
        try:
            async with self.client_factory() as client:
                for index, target in enumerate(self.targets):
                    if self._abort_requested:
                        break

                    try:
                        await self._import_target(client, index, target)
                    except PageFetchError as e:
                        logger.error(f"Bad URL '{e.url}': {e}")
                        self._abort_requested = True
                        break

                    self._advance(index, PHASES_PER_TARGET)
                    processed += 1
        except Exception:
            self.state = ImportState.ABORTED
            raise

        if processed < len(self.targets):
            self.state = ImportState.ABORTED
            self.progress.status = f"Import aborted after {processed} of {len(self.targets)} pages"
            return self.state

        self.progress.progress = 1.0
        self.state = ImportState.COMPLETED
        self.progress.status = "Import complete"

        for callback in self._completion_callbacks:
            callback(self.container)

        return self.state

    async def _import_target(self, client, index: int, target: ImportTarget):
        if target.element_type is None:
            logger.error(f"Could not identify type of records stored in '{target.name}'")
            return

        self.progress.status = f"Downloading page '{target.page_name}'..."
        url = build_page_url(self.document_id, target.page_name)
        raw_text = await client.fetch(url)
        self._advance(index, 1)

        self.progress.status = "Analysing headers..."
        headers, rows = self.table_reader.read(raw_text)
        binding = self.binder.bind(headers, target.element_type)
        self._advance(index, 2)

        kind_label = "list" if target.kind == TargetKind.COLLECTION else "single record"
        self.progress.status = (
            f"Populating {kind_label} '{target.name}'<{target.element_type.__name__}>..."
        )
        result = self.assembler.assemble(binding, rows, target)
        if result is not None:
            result.write_to(self.container)

    def _advance(self, index: int, phases_done: int):
        total = PHASES_PER_TARGET * len(self.targets)
        self.progress.progress = (PHASES_PER_TARGET * index + phases_done) / total
