"""Cloud Asset Inventory export orchestration."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Dict, Optional

from ..exceptions import InventoryError, InventoryExportError
from ..gcp import AssetClient
from ..model.inventory import EXPORT_ORDER, ExportRequest, InventoryConfig
from ..model.result import ExportJobResult, ExportSummary, JobStatus
from ..utils.logger import get_logger


class InventoryExporter:
    """Exports resource and IAM policy inventories to a GCS bucket.

    Every content type is attempted even if an earlier one fails. Failures are
    collected and raised together once all jobs have finished.
    """

    def __init__(
        self,
        client: AssetClient,
        logger: Optional[logging.Logger] = None,
        concurrent: bool = False,
    ):
        self.client = client
        self.logger = logger or get_logger(__name__)
        self.concurrent = concurrent

    def export(
        self,
        config: InventoryConfig,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> ExportSummary:
        """Run all exports for a config and wait for them to finish."""
        self.logger.info(
            f"Exporting inventory of {config.parent} to gs://{config.bucket} "
            f"(control project: {config.control_project_id})"
        )

        requests = [ExportRequest.for_content_type(config, ct) for ct in EXPORT_ORDER]

        if self.concurrent:
            with ThreadPoolExecutor(max_workers=len(requests)) as executor:
                futures = [
                    executor.submit(self._run_job, request, timeout, cancel_event)
                    for request in requests
                ]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [self._run_job(request, timeout, cancel_event) for request in requests]

        summary = ExportSummary(parent=config.parent, results=[result for result, _ in outcomes])

        errors: Dict[str, InventoryError] = {
            result.content_type.value: error for result, error in outcomes if error is not None
        }
        if errors:
            self.logger.error(f"Inventory export failed for {', '.join(errors)}")
            raise InventoryExportError(errors, summary=summary)

        self.logger.info(f"Inventory export of {config.parent} complete")
        return summary

    def _run_job(
        self,
        request: ExportRequest,
        timeout: Optional[float],
        cancel_event: Optional[threading.Event],
    ):
        """Submit one export and wait for it; returns (result, error)."""
        result = ExportJobResult(
            content_type=request.content_type, destination_uri=request.destination_uri
        )
        result.started_at = datetime.now()

        try:
            operation = self.client.submit(request)
            result.status = JobStatus.SUBMITTED
            self.logger.info(
                f"Submitted {request.content_type.value} export to {request.destination_uri}"
            )
            self.client.wait(
                operation, request.destination_uri, timeout=timeout, cancel_event=cancel_event
            )
        except InventoryError as e:
            result.status = JobStatus.FAILED
            result.error = str(e)
            result.finished_at = datetime.now()
            self.logger.error(f"{request.content_type.value} export failed: {e}")
            return result, e

        result.status = JobStatus.SUCCEEDED
        result.finished_at = datetime.now()
        self.logger.info(f"{request.content_type.value} export written to {request.destination_uri}")
        return result, None


def export_inventory(
    config: InventoryConfig,
    client: Optional[AssetClient] = None,
    logger: Optional[logging.Logger] = None,
    concurrent: bool = False,
    timeout: Optional[float] = None,
    cancel_event: Optional[threading.Event] = None,
) -> ExportSummary:
    """Export both inventories for a config using a default client."""
    client = client or AssetClient(control_project_id=config.control_project_id)
    exporter = InventoryExporter(client, logger=logger, concurrent=concurrent)
    return exporter.export(config, timeout=timeout, cancel_event=cancel_event)
