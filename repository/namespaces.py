# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "pagecite"

DOCUMENTS: Final[str] = f"{ROOT}:documents"
INDEXES: Final[str] = f"{DOCUMENTS}:index"  # one serialized DocumentIndex per document
BLOBS: Final[str] = f"{DOCUMENTS}:blob"  # original uploaded PDF bytes
