"""
utils/uploads.py
----------------
Helpers for binary payloads: reading multipart uploads into memory and
rendering stored bytes for JSON responses.
"""
import base64
from typing import Optional

from fastapi import HTTPException, UploadFile, status

import config


async def read_upload(upload: Optional[UploadFile], max_bytes: Optional[int] = None) -> Optional[bytes]:
     """
     Read an uploaded file fully into memory.

     Returns None when no file (or an empty one) was sent.

     Raises:
          HTTPException: 400 if the file is larger than the configured limit
     """
     if upload is None:
          return None
     limit = config.MAX_UPLOAD_BYTES if max_bytes is None else max_bytes

     # One extra byte tells an oversized file apart from one exactly at the limit
     data = await upload.read(limit + 1)
     await upload.close()
     if len(data) > limit:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=f"File '{upload.filename}' exceeds the {limit} byte limit"
          )
     return data or None


def encode_binary(data: Optional[bytes]) -> Optional[str]:
     """Base64 text for a stored blob, None when there is none."""
     if not data:
          return None
     return base64.b64encode(data).decode("ascii")
