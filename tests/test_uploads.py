import re

from core.config import settings
from services import image_storage


def _files(*contents):
    return [("file", (f"foto{i}.png", content, "image/png")) for i, content in enumerate(contents)]


def test_upload_stores_files_under_generated_names(client, images_dir):
    contents = [b"primera imagen", b"segunda imagen", b"tercera"]
    response = client.post("/upload", files=_files(*contents))

    assert response.status_code == 200
    body = response.json()
    names = body["uploadedFileNames"]
    assert len(names) == 3
    assert len(set(names)) == 3
    assert all(name.endswith(".jpg") and "foto" not in name for name in names)
    assert re.fullmatch(r"\d+\.\d{2} MB", body["totalUploadedSize"])
    assert body["message"] == "Images uploaded successfully"

    for name, content in zip(names, contents):
        assert (images_dir / name).read_bytes() == content
        served = client.get(f"/images/{name}")
        assert served.status_code == 200
        assert served.content == content
        assert served.headers["content-type"] == "image/jpeg"


def test_upload_reports_total_size_in_megabytes(client):
    half_mb = b"x" * (512 * 1024)
    response = client.post("/upload", files=_files(half_mb, half_mb, half_mb))

    assert response.status_code == 200
    assert response.json()["totalUploadedSize"] == "1.50 MB"


def test_oversized_upload_is_rejected_before_writing(client, images_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_FILE_SIZE", 10)

    response = client.post("/upload", files=_files(b"small", b"this one is too large"))

    assert response.status_code == 413
    assert response.json()["error_code"] == "PayloadTooLargeError"
    assert list(images_dir.iterdir()) == []


def test_too_many_files_are_rejected(client, images_dir):
    contents = [b"img"] * (settings.MAX_UPLOAD_FILES + 1)

    response = client.post("/upload", files=_files(*contents))

    assert response.status_code == 400
    assert list(images_dir.iterdir()) == []


def test_upload_without_files_stores_nothing(client, images_dir):
    response = client.post("/upload", files=[("other", (None, b"value"))])

    assert response.status_code == 200
    assert response.json()["uploadedFileNames"] == []
    assert response.json()["totalUploadedSize"] == "0.00 MB"
    assert list(images_dir.iterdir()) == []


def test_write_failure_keeps_files_already_written(client, images_dir, monkeypatch):
    real_copy = image_storage.shutil.copyfileobj
    calls = []

    def copy_then_fail(source, target, *args, **kwargs):
        calls.append(source)
        if len(calls) == 2:
            raise OSError(28, "No space left on device")
        return real_copy(source, target, *args, **kwargs)

    monkeypatch.setattr(image_storage.shutil, "copyfileobj", copy_then_fail)

    response = client.post("/upload", files=_files(b"primera", b"segunda", b"tercera"))

    assert response.status_code == 500
    assert response.json()["error_code"] == "FilesystemError"
    stored = list(images_dir.iterdir())
    assert len(stored) == 1
    assert stored[0].read_bytes() == b"primera"


def test_serving_missing_image_is_not_found(client):
    response = client.get("/images/no-existe.jpg")
    assert response.status_code == 404
    assert response.json()["error_code"] == "ResourceNotFoundError"


def test_delete_stored_image(client, images_dir):
    name = client.post("/upload", files=_files(b"borrar")).json()["uploadedFileNames"][0]

    response = client.delete(f"/images/{name}")
    assert response.status_code == 200
    assert response.json()["message"] == "Image deleted successfully"
    assert not (images_dir / name).exists()
    assert client.get(f"/images/{name}").status_code == 404


def test_delete_missing_image_is_filesystem_error(client):
    response = client.delete("/images/no-existe.jpg")
    assert response.status_code == 500
    assert response.json()["error_code"] == "FilesystemError"


def test_uploaded_files_are_not_linked_to_image_rows(client, product_id):
    name = client.post("/upload", files=_files(b"suelta")).json()["uploadedFileNames"][0]

    assert client.get(f"/producto-images/{product_id}").json() == []
    client.post(f"/images/{name}/{product_id}")
    client.delete(f"/images/{name}")
    assert client.get(f"/producto-images/{product_id}").json() == [name]
