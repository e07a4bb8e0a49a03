from __future__ import annotations

from ..capabilities import ToFileRef, to_file_ref
from ..refs import FileRef
from ..responses import JsonResponse
from ..types import File
from ._base import Request


class GetFile(Request, kw_only=True):
    method_name = "getFile"
    response_type = JsonResponse(File)

    file_id: FileRef


def get_file(file: ToFileRef) -> GetFile:
    return GetFile(file_id=to_file_ref(file))
