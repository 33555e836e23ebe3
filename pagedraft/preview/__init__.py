from pagedraft.preview.gate import CONNECTION_ERROR_MESSAGE, NOT_FOUND_MESSAGE, PreviewGate
from pagedraft.preview.token import PreviewTokenSigner

__all__ = [
    "CONNECTION_ERROR_MESSAGE",
    "NOT_FOUND_MESSAGE",
    "PreviewGate",
    "PreviewTokenSigner",
]
