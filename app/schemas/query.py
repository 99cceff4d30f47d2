from typing import List, Optional

from pydantic import BaseModel
from pydantic.config import ConfigDict

from app.errors import RemoteQueryError


class QueryResult(BaseModel):
    """Rows of a Supabase query, or the error that replaced them."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    table: str
    data: Optional[List[dict]] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def rows(self) -> List[dict]:
        return list(self.data or [])

    def unwrap(self) -> List[dict]:
        if self.error is not None:
            raise RemoteQueryError(self.table, self.error)
        return self.rows()
