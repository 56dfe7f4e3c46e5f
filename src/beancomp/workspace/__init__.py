# beancomp.workspace - Workspace management module
from beancomp.workspace.snapshot import WorkspaceSnapshot
from beancomp.workspace.document import LoadedDocument
from beancomp.workspace.workspace import Workspace, compute_hash, path_to_uri

__all__ = [
    "WorkspaceSnapshot",
    "LoadedDocument",
    "Workspace",
    "compute_hash",
    "path_to_uri",
]
