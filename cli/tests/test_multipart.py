from kintone_client.multipart import build_multipart_body, content_type_for

PNG_BYTES = bytes([0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A, 0x00, 0xFF])


def _parse_single_part(body: bytes, boundary: str) -> tuple[dict[str, str], bytes]:
    opening = f"--{boundary}\r\n".encode()
    closing = f"\r\n--{boundary}--".encode()
    assert body.startswith(opening)
    assert body.endswith(closing)
    inner = body[len(opening):-len(closing)]
    head, content = inner.split(b"\r\n\r\n", 1)
    headers = {}
    for line in head.decode("utf-8").split("\r\n"):
        key, _, value = line.partition(":")
        headers[key.strip().lower()] = value.strip()
    return headers, content


def test_body_holds_one_file_part() -> None:
    body = build_multipart_body("a.png", "image/png", PNG_BYTES)
    headers, content = _parse_single_part(body, "blob")

    assert headers["content-disposition"] == 'form-data; name="file"; filename="a.png"'
    assert headers["content-type"] == "image/png"
    assert content == PNG_BYTES
    assert body.count(b"--blob") == 2


def test_custom_boundary_and_empty_file() -> None:
    body = build_multipart_body("empty.txt", "text/plain", b"", boundary="xyz")
    headers, content = _parse_single_part(body, "xyz")
    assert headers["content-type"] == "text/plain"
    assert content == b""


def test_non_ascii_filename_is_utf8() -> None:
    body = build_multipart_body("日報.pdf", "application/pdf", b"%PDF")
    assert 'filename="日報.pdf"'.encode("utf-8") in body


def test_content_type_header_value() -> None:
    assert content_type_for() == "multipart/form-data; boundary=blob"
    assert content_type_for("xyz") == "multipart/form-data; boundary=xyz"


def test_filename_quotes_are_escaped_and_newlines_dropped() -> None:
    body = build_multipart_body('we"ird\r\nX-Evil: 1.txt', "text/plain\r\n", b"data")
    headers, content = _parse_single_part(body, "blob")

    assert headers["content-disposition"] == 'form-data; name="file"; filename="we\\"irdX-Evil: 1.txt"'
    assert headers["content-type"] == "text/plain"
    assert "x-evil" not in headers
    assert content == b"data"
