import uuid

from pydantic import BaseModel, Field


def new_session_id() -> str:
    return str(uuid.uuid4())


class Session(BaseModel):
    """Stores the cursor of a single caller into the shared namespace."""

    id: str = Field(default_factory=new_session_id)
    # Valid when set; may go stale if another session deletes it.
    current_working_directory: str = "/"
