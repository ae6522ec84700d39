# src/nodecounter/collectors/grid_node_collector.py
"""
Collector for the node list of the ThreeFold Grid GraphQL API.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..core.config import ReportSettings
from ..core.exceptions import HttpStatusError, JsonParseError, NetworkError, SchemaError
from ..models.node import Node
from ..utils.http_client import get_async_http_client
from .base_collector import BaseCollector

logger = logging.getLogger(__name__)


class GridNodeCollector(BaseCollector):
    """
    Fetches every node of the grid in a single GraphQL request.

    Any failure is raised as a FetchError subclass; there is no retry and no
    partial result.
    """

    def __init__(self, settings: ReportSettings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._owns_client = client is None
        self.client = client or get_async_http_client(settings)

    def build_payload(self) -> Dict[str, Any]:
        return {
            "operationName": self.settings.operation_name,
            "query": self.settings.query,
            "variables": None,
        }

    async def collect(self) -> List[Node]:
        url = self.settings.graphql_url
        logger.info(f"Fetching nodes from {url}...")

        # httpx timeouts apply per phase; this bounds the whole request.
        try:
            response = await asyncio.wait_for(
                self.client.post(url, json=self.build_payload()),
                timeout=self.settings.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request to {url} timed out after {self.settings.timeout_seconds}s") from e
        except httpx.RequestError as e:
            raise NetworkError(f"Could not reach {url}: {e}") from e

        if not response.is_success:
            raise HttpStatusError(
                f"GraphQL endpoint {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise JsonParseError(f"Response from {url} is not valid JSON: {e}") from e

        nodes = self.parse_nodes(body)
        logger.info(f"Received {len(nodes)} nodes.")
        return nodes

    @staticmethod
    def parse_nodes(body: Any) -> List[Node]:
        """
        Validates a decoded `{"data": {"nodes": [...]}}` reply into Node records.
        """
        if not isinstance(body, dict):
            raise SchemaError("Response body is not a JSON object")

        data = body.get("data")
        if not isinstance(data, dict):
            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                messages = "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors)
                raise SchemaError(f"GraphQL query failed: {messages}")
            raise SchemaError("Response is missing the 'data' object")

        raw_nodes = data.get("nodes")
        if not isinstance(raw_nodes, list):
            raise SchemaError("Response is missing the 'data.nodes' list")

        nodes = []
        for index, raw in enumerate(raw_nodes):
            try:
                nodes.append(Node.model_validate(raw))
            except ValidationError as e:
                raise SchemaError(f"Invalid node at index {index}: {e}") from e
        return nodes

    async def close(self):
        if self._owns_client:
            await self.client.aclose()
