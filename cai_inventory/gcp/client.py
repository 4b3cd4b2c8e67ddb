"""Cloud Asset Inventory client wrapper."""

import concurrent.futures
import threading
import time
from typing import Optional

from google.api_core import exceptions as google_exceptions
from google.api_core.client_options import ClientOptions
from google.api_core.operation import Operation
from google.auth import exceptions as auth_exceptions
from google.cloud import asset_v1

from ..exceptions import (
    ExportCancelledError,
    ExportTimeoutError,
    OperationError,
    SubmissionError,
)
from ..model.inventory import ExportRequest
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Errors raised by the SDK, including credential lookup and token refresh
SDK_ERRORS = (
    google_exceptions.GoogleAPICallError,
    google_exceptions.RetryError,
    auth_exceptions.GoogleAuthError,
)


class AssetClient:
    """Wrapper for the Cloud Asset export API."""

    DEFAULT_POLL_INTERVAL = 5.0

    def __init__(
        self,
        control_project_id: Optional[str] = None,
        client: Optional[asset_v1.AssetServiceClient] = None,
    ):
        self.control_project_id = control_project_id
        self._client = client
        self._client_lock = threading.Lock()

    @property
    def client(self) -> asset_v1.AssetServiceClient:
        """Underlying SDK client, created on first use."""
        with self._client_lock:
            if self._client is None:
                options = None
                if self.control_project_id:
                    # Bill API usage to the control project
                    options = ClientOptions(quota_project_id=self.control_project_id)
                self._client = asset_v1.AssetServiceClient(client_options=options)
                logger.debug(
                    f"Created asset client (control project: {self.control_project_id})"
                )
        return self._client

    def build_request(self, request: ExportRequest) -> asset_v1.ExportAssetsRequest:
        """Build the SDK request for an export."""
        return asset_v1.ExportAssetsRequest(
            parent=request.parent,
            content_type=asset_v1.ContentType[request.content_type.value],
            output_config=asset_v1.OutputConfig(
                gcs_destination=asset_v1.GcsDestination(uri=request.destination_uri)
            ),
        )

    def submit(self, request: ExportRequest) -> Operation:
        """Submit an export request and return its long-running operation."""
        logger.debug(
            f"Submitting {request.content_type.value} export of {request.parent} "
            f"to {request.destination_uri}"
        )
        try:
            return self.client.export_assets(request=self.build_request(request))
        except SDK_ERRORS as e:
            logger.error(f"Export request rejected: {e}")
            raise SubmissionError(request.destination_uri, cause=e)

    def wait(
        self,
        operation: Operation,
        destination_uri: str,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        """Block until an export operation finishes.

        With no cancel event the SDK's own polling is used. Otherwise the
        operation is polled every ``poll_interval`` seconds and cancelled
        remotely as soon as the event is set.
        """
        try:
            if cancel_event is None:
                return operation.result(timeout=timeout)

            deadline = time.monotonic() + timeout if timeout is not None else None
            while not operation.done():
                if cancel_event.is_set():
                    self._cancel(operation, destination_uri)
                    raise ExportCancelledError(destination_uri)

                delay = poll_interval
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise ExportTimeoutError(destination_uri, timeout)
                    delay = min(delay, remaining)
                cancel_event.wait(delay)

            return operation.result()
        except concurrent.futures.TimeoutError:
            raise ExportTimeoutError(destination_uri, timeout)
        except SDK_ERRORS as e:
            logger.error(f"Export to {destination_uri} failed: {e}")
            raise OperationError(destination_uri, cause=e)

    def _cancel(self, operation: Operation, destination_uri: str):
        """Request remote cancellation; failures are logged only."""
        try:
            operation.cancel()
            logger.info(f"Cancelled export to {destination_uri}")
        except SDK_ERRORS as e:
            logger.warning(f"Could not cancel export to {destination_uri}: {e}")
