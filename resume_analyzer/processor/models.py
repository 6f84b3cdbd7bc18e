from dataclasses import dataclass


@dataclass(frozen=True)
class Upload:
    """A resume received by the upload endpoint, held only for one request."""

    content: bytes
    file_name: str
    target_role: str
