from pydantic import BaseModel
from typing import Optional

class HealthResponse(BaseModel):
    status: str
    database_path: str
    content_root: str
    file_references: int
    managed_file_references: int
    soft_file_references: int
    error: Optional[str] = None
