"""
Session Count Service Models

Identity input and the table search request sent to the session store.
"""

from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    ACTIVE_SESSION_TABLE_NAME,
    SESSION_COUNT_MAX,
    START_INDEX,
)


class Identity(BaseModel):
    """Authenticated user as seen by the session count authenticator"""
    model_config = ConfigDict(frozen=True)

    tenant_domain: str = Field(..., description="Tenant domain of the user")
    username: str = Field(..., description="Username of the user")
    user_store_domain: str = Field(..., description="User store domain of the user")


class SessionQueryRequest(BaseModel):
    """Table search request body for the session store"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    table_name: str = Field(default=ACTIVE_SESSION_TABLE_NAME, alias="tableName")
    query: str = Field(..., description="Serialized session query")
    start: int = Field(default=START_INDEX)
    count: int = Field(default=SESSION_COUNT_MAX)

    def to_payload(self) -> Dict[str, Any]:
        """Request body using the session store's wire keys"""
        return self.model_dump(by_alias=True)


# Each record's shape is owned by the session store
SessionRecords = List[Any]
