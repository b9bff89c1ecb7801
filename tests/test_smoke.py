import base64

from fastapi.testclient import TestClient
from contacts_csv.main import app

client = TestClient(app)

SAMPLE = (
    "Timestamp,Role,First name,Group and last name,Login e-mail,New e-mail,Phone\n"
    "01.09.2024,Староста,Иван,ПМ-35 ПОНОМАРЕВ,login@x.com,new@x.com,+79990000000\n"
    "01.09.2024,Student,Short,row\n"
)

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_convert_returns_utf8_bom_csv():
    files = {"file": ("export.csv", SAMPLE.encode("utf-8"), "text/csv")}
    r = client.post("/convert", files=files, data={"label": "ПМ-35"})
    assert r.status_code == 200

    data = r.json()
    assert data["converted_csv"]["encoding"] == "utf-8-sig"

    out_bytes = base64.b64decode(data["converted_csv"]["content_b64"])
    assert out_bytes.startswith(b"\xef\xbb\xbf")
    lines = out_bytes.decode("utf-8-sig").split("\n")
    assert lines[0].startswith("First Name,Middle Name,Last Name,")
    assert lines[1].split(",")[:3] == ["Иван", "", "ПМ-35 ПОНОМАРЕВ"]
    assert lines[1].split(",")[16] == "ПМ-35"

    summary = data["report"]["summary"]
    assert summary["rows_processed"] == 1
    assert summary["warnings"] == 1
    assert data["report"]["warnings"][0]["issue"] == "too_few_fields"

def test_convert_without_label():
    files = {"file": ("EXPORT.CSV", SAMPLE.encode("utf-8"), "text/csv")}
    r = client.post("/convert", files=files)
    assert r.status_code == 200
    assert r.json()["report"]["summary"]["label"] == ""

def test_convert_rejects_non_csv():
    files = {"file": ("export.txt", b"a,b\n", "text/plain")}
    r = client.post("/convert", files=files)
    assert r.status_code == 422
