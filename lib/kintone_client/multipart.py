from __future__ import annotations

DEFAULT_BOUNDARY = "blob"
CRLF = b"\r\n"


def _one_line(value: str) -> str:
    return value.replace("\r", "").replace("\n", "")


def _quote_param(value: str) -> str:
    # quotes inside a quoted-string are escaped
    return _one_line(value).replace("\\", "\\\\").replace('"', '\\"')


def content_type_for(boundary: str = DEFAULT_BOUNDARY) -> str:
    return f"multipart/form-data; boundary={boundary}"


def build_multipart_body(
        filename: str,
        mime_type: str,
        content: bytes,
        *,
        boundary: str = DEFAULT_BOUNDARY,
        field_name: str = "file",
) -> bytes:
    """Single-part multipart/form-data body for the file.json endpoint."""
    marker = f"--{boundary}".encode("utf-8")
    disposition = (
        f'Content-Disposition: form-data; name="{_quote_param(field_name)}"; '
        f'filename="{_quote_param(filename)}"'
    )

    buf = bytearray()
    # part headers
    buf += marker + CRLF
    buf += disposition.encode("utf-8") + CRLF
    buf += f"Content-Type: {_one_line(mime_type)}".encode("utf-8") + CRLF
    buf += CRLF
    # part body
    buf += content
    buf += CRLF
    # closing boundary
    buf += marker + b"--"
    return bytes(buf)
