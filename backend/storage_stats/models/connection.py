"""
Connection descriptor built from request parameters.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MONGODB_SCHEME = "mongodb://"


class ConnectionDescriptor(BaseModel):
    """
    Validated parameters needed to open one MongoDB connection.

    Built once per request and discarded once its connection is closed.
    """
    model_config = ConfigDict(frozen=True)

    hosts: tuple[str, ...] = Field(..., min_length=1, description="host[:port] entries")
    replica_set: Optional[str] = Field(None, description="Replica set name")
    max_pool_size: Optional[int] = Field(None, gt=0, description="Driver pool size")
    ssl: bool = False
    tls: bool = False

    @field_validator("hosts")
    @classmethod
    def hosts_not_blank(cls, hosts: tuple[str, ...]) -> tuple[str, ...]:
        if any(not host for host in hosts):
            raise ValueError("host entries must be non-empty")
        return hosts

    @property
    def connection_string(self) -> str:
        """Seed list URI, e.g. mongodb://host1:27017,host2:27017"""
        return f"{MONGODB_SCHEME}{','.join(self.hosts)}"

    def client_options(self) -> dict[str, Any]:
        """
        Keyword options for the driver client.

        The driver treats ssl as an alias of tls and refuses conflicting
        values, so both flags collapse into a single tls option.
        """
        options: dict[str, Any] = {"tls": self.ssl or self.tls}
        if self.replica_set is not None:
            options["replicaSet"] = self.replica_set
        if self.max_pool_size is not None:
            options["maxPoolSize"] = self.max_pool_size
        return options
