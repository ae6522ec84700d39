# src/nodecounter/core/config.py

import logging
import os
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

MAINNET_GRAPHQL_URL = "https://graphql.grid.tf/graphql"

NODE_QUERY = """
query MyQuery {  nodes {    nodeID    created    farmID    resourcesTotal {      cru      hru      mru      sru    }  }}
"""


class ReportSettings(BaseModel):
    """
    Immutable settings for a single report run.

    Built once at startup from :class:`Config` and handed to the collector,
    the aggregator and the exporter.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    graphql_url: str = Field(MAINNET_GRAPHQL_URL, description="GraphQL endpoint queried for nodes")
    query: str = Field(NODE_QUERY, description="GraphQL document listing the nodes")
    operation_name: str = Field("list_nodes", description="GraphQL operation name")
    user_agent: str = Field("node_counter_agent", description="User-Agent header sent to the endpoint")
    timeout_seconds: float = Field(30.0, gt=0, description="Request timeout in seconds")
    start_year: int = Field(2022, description="First year of the report")
    years: int = Field(10, gt=0, description="Number of years covered at most")
    output_path: str = Field("node_count.csv", min_length=1, description="CSV file written by the report")

    @field_validator("graphql_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if urlparse(value).scheme not in ("http", "https"):
            raise ValueError("graphql_url must be an http or https URL")
        return value


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    Every value has a default matching the fixed behaviour of the report, so an
    empty environment produces the canonical run.
    """

    # These are properties so their values are resolved at access time and
    # tests can change the environment after import.
    @property
    def GRAPHQL_URL(self) -> str:
        return os.getenv("NODECOUNTER_GRAPHQL_URL", MAINNET_GRAPHQL_URL)

    @property
    def START_YEAR(self) -> int:
        return int(os.getenv("NODECOUNTER_START_YEAR", "2022"))

    @property
    def YEARS(self) -> int:
        return int(os.getenv("NODECOUNTER_YEARS", "10"))

    @property
    def OUTPUT_PATH(self) -> str:
        return os.getenv("NODECOUNTER_OUTPUT", "node_count.csv")

    @property
    def TIMEOUT(self) -> float:
        return float(os.getenv("NODECOUNTER_TIMEOUT", "30"))

    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO")

    USER_AGENT = "node_counter_agent"
    OPERATION_NAME = "list_nodes"
    NODE_QUERY = NODE_QUERY

    def validate_instance(self):
        scheme = urlparse(self.GRAPHQL_URL).scheme
        if scheme not in ("http", "https"):
            raise ValueError("NODECOUNTER_GRAPHQL_URL must be an http or https URL")
        if self.YEARS <= 0:
            raise ValueError("NODECOUNTER_YEARS must be a positive integer")
        if self.TIMEOUT <= 0:
            raise ValueError("NODECOUNTER_TIMEOUT must be positive")
        if not self.OUTPUT_PATH:
            raise ValueError("NODECOUNTER_OUTPUT must not be empty")
        if self.GRAPHQL_URL != MAINNET_GRAPHQL_URL:
            logging.getLogger(__name__).warning("Using non-default GraphQL endpoint %s", self.GRAPHQL_URL)

    def to_settings(self, **overrides) -> ReportSettings:
        """
        Builds the frozen settings for a run. Keyword overrides whose value is
        None are ignored so CLI options can be forwarded as-is.
        """
        values = {
            "graphql_url": self.GRAPHQL_URL,
            "query": self.NODE_QUERY,
            "operation_name": self.OPERATION_NAME,
            "user_agent": self.USER_AGENT,
            "timeout_seconds": self.TIMEOUT,
            "start_year": self.START_YEAR,
            "years": self.YEARS,
            "output_path": self.OUTPUT_PATH,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ReportSettings(**values)


# Instantiate the config to be imported by other modules
config = Config()
