"""
Тесты HTTP-эндпоинтов документов.
"""

import re

import pytest

from conftest import current_otp


def upload(client, headers, content=b"hello", name=None, overwrite=None, content_type="text/plain"):
    params = {}
    if name is not None:
        params["fileName"] = name
    if overwrite is not None:
        params["overwrite"] = overwrite
    return client.post(
        "/upload",
        headers=headers,
        params=params,
        files={"file": ("upload.txt", content, content_type)}
    )


def test_document_lifecycle(client):
    key = client.post("/create-key", params={"otp": current_otp()}).json()[0]["key"]
    headers = {"apikey": key}

    created = upload(client, headers, b"hello", name="notes")
    assert created.status_code == 200
    assert re.fullmatch(r"[A-Za-z]{5}", created.json()["id"])

    assert client.get("/raw/notes").text == "hello"

    edited = client.put("/edit/notes", headers=headers, files={"file": ("n.txt", b"world", "text/plain")})
    assert edited.json() == {"message": "File updated successfully"}
    assert client.get("/raw/notes").text == "world"

    deleted = client.delete("/delete/notes", headers=headers)
    assert deleted.json() == {"message": "File deleted successfully"}

    missing = client.get("/raw/notes")
    assert missing.status_code == 404
    assert missing.json() == {"error": "File not found"}


def test_raw_read_is_public_and_plain_text(client, auth_headers):
    document_id = upload(client, auth_headers, "привет".encode("utf-8"), name="greeting").json()["id"]

    response = client.get(f"/raw/{document_id}")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "привет"


def test_raw_requires_identifier(client):
    response = client.get("/raw")

    assert response.status_code == 400
    assert response.json() == {"error": "Identifier is required"}


def test_upload_requires_authentication(client, auth_headers):
    response = upload(client, {}, name="notes")

    assert response.status_code == 401
    assert client.get("/list", headers=auth_headers).json() == []


def test_upload_requires_file(client, auth_headers):
    response = client.post("/upload", headers=auth_headers, params={"fileName": "notes"})

    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


@pytest.mark.parametrize("content_type", ["application/json", "application/xml", "text/xml",
                                          "application/x-yaml", "text/yaml", "text/plain; charset=utf-8"])
def test_upload_accepts_text_types(client, auth_headers, content_type):
    assert upload(client, auth_headers, content_type=content_type).status_code == 200


def test_upload_rejects_other_types(client, auth_headers):
    response = upload(client, auth_headers, b"\x89PNG", content_type="image/png")

    assert response.status_code == 400
    assert response.json() == {"error": "Only JSON, TXT, XML, and YAML files are allowed"}


def test_upload_rejects_non_utf8_content(client, auth_headers):
    response = upload(client, auth_headers, b"\xff\xfe\xfa")

    assert response.status_code == 400
    assert response.json() == {"error": "File content must be UTF-8 text"}


def test_upload_name_from_form_field(client, auth_headers):
    response = client.post(
        "/upload",
        headers=auth_headers,
        data={"fileName": "from-form"},
        files={"file": ("f.txt", b"form", "text/plain")}
    )

    assert response.status_code == 200
    assert client.get("/raw/from-form").text == "form"


def test_upload_without_name_generates_one(client, auth_headers):
    document_id = upload(client, auth_headers).json()["id"]

    listing = client.get("/list", headers=auth_headers).json()

    assert listing[0]["id"] == document_id
    assert re.fullmatch(r"[A-Za-z]{22}", listing[0]["name"])


def test_upload_existing_name_conflicts(client, auth_headers):
    upload(client, auth_headers, b"first", name="notes")

    response = upload(client, auth_headers, b"second", name="notes")

    assert response.status_code == 409
    assert response.json() == {"error": "File name already exists"}
    assert client.get("/raw/notes").text == "first"


def test_upload_overwrite_replaces_document(client, auth_headers):
    first_id = upload(client, auth_headers, b"first", name="notes").json()["id"]

    response = upload(client, auth_headers, b"second", name="notes", overwrite="true")

    assert response.status_code == 200
    assert response.json()["id"] != first_id
    assert client.get("/raw/notes").text == "second"
    assert client.get(f"/raw/{first_id}").status_code == 404


def test_overwrite_must_be_literal_true(client, auth_headers):
    upload(client, auth_headers, b"first", name="notes")

    assert upload(client, auth_headers, b"second", name="notes", overwrite="1").status_code == 409


def test_list_documents_has_no_content(client, auth_headers):
    first_id = upload(client, auth_headers, b"one", name="a").json()["id"]
    second_id = upload(client, auth_headers, b"two", name="b").json()["id"]

    response = client.get("/list", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == [{"id": first_id, "name": "a"}, {"id": second_id, "name": "b"}]


def test_list_documents_requires_authentication(client):
    assert client.get("/list").status_code == 401


def test_edit_by_id_keeps_identity(client, auth_headers):
    document_id = upload(client, auth_headers, b"hello", name="notes").json()["id"]

    client.put(f"/edit/{document_id}", params={"apiKey": auth_headers["apikey"]},
               files={"file": ("n.txt", b"world", "text/plain")})

    assert client.get("/list", headers=auth_headers).json() == [{"id": document_id, "name": "notes"}]
    assert client.get("/raw/notes").text == "world"


def test_edit_missing_document(client, auth_headers):
    response = client.put("/edit/missing", headers=auth_headers, files={"file": ("n.txt", b"x", "text/plain")})

    assert response.status_code == 404
    assert response.json() == {"error": "File not found"}


def test_edit_requires_file(client, auth_headers):
    upload(client, auth_headers, name="notes")

    response = client.put("/edit/notes", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "File is required"}


def test_edit_requires_identifier(client, auth_headers):
    response = client.put("/edit", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Identifier is required"}


def test_edit_requires_authentication(client, auth_headers):
    upload(client, auth_headers, b"hello", name="notes")

    response = client.put("/edit/notes", files={"file": ("n.txt", b"world", "text/plain")})

    assert response.status_code == 401
    assert client.get("/raw/notes").text == "hello"


def test_delete_missing_document(client, auth_headers):
    response = client.delete("/delete/missing", headers=auth_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "File not found"}


def test_delete_requires_identifier(client, auth_headers):
    response = client.delete("/delete", headers=auth_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Identifier is required"}


def test_delete_requires_authentication(client, auth_headers):
    upload(client, auth_headers, b"hello", name="notes")

    assert client.delete("/delete/notes").status_code == 401
    assert client.get("/raw/notes").text == "hello"
