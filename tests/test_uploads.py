import pytest

from mapping_dashboard.core.errors import InvalidInput
from mapping_dashboard.core.upload_validation import missing_headers, parse_csv

TRAVEL_CSV = (
    "employee_id,destination,departure_date,return_date,purpose,cost\n"
    "emp-101,London,2026-01-10,2026-01-14,Client visit,1200\n"
    "\n"
    "emp-201,Paris,2026-02-02,2026-02-03,Workshop,300\n"
)


def test_missing_travel_headers():
    """Test missing travel columns come back in schema order"""
    assert missing_headers("employee_id,destination,cost", "travel") == [
        "departure_date",
        "return_date",
        "purpose",
    ]


def test_headers_are_case_and_space_insensitive():
    """Test header matching ignores case and surrounding spaces"""
    assert missing_headers(" Employee_ID , Charity_Name,donation_date,AMOUNT,matched ", "donations") == []


def test_unknown_file_type():
    """Test an unknown file type raises InvalidInput"""
    with pytest.raises(InvalidInput):
        missing_headers("employee_id", "expenses")


def test_parse_csv_skips_blank_lines():
    """Test CSV parsing skips blank lines"""
    header, rows = parse_csv(TRAVEL_CSV)
    assert header[0] == "employee_id"
    assert len(rows) == 2
    assert parse_csv("") == ([], [])


def test_validate_headers_endpoint(client):
    """Test POST /uploads/validate-headers"""
    r = client.post(
        "/uploads/validate-headers",
        json={"file_type": "meetings", "header_row": "employee_id,meeting_date,duration,attendees,purpose,location"},
    )
    assert r.status_code == 200
    assert r.json() == {"file_type": "meetings", "valid": True, "missing_headers": []}


def test_upload_records_history(client):
    """Test a valid upload is recorded in history"""
    r = client.post(
        "/uploads",
        data={"file_type": "travel"},
        files={"file": ("travel_jan.csv", TRAVEL_CSV, "text/csv")},
        headers={"X-User-Email": "ops@company.com"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["row_count"] == 2
    assert body["upload"]["status"] == "Completed"
    assert body["upload"]["uploaded_by"] == "ops@company.com"

    history = client.get("/uploads", params={"file_type": "travel"}).json()
    assert [u["file_name"] for u in history] == ["travel_jan.csv"]
    assert client.get("/uploads", params={"file_type": "donations"}).json() == []


def test_upload_history_newest_first(client):
    """Test upload history lists newest first"""
    for name in ("a.csv", "b.csv"):
        client.post("/uploads", data={"file_type": "travel"}, files={"file": (name, TRAVEL_CSV, "text/csv")})

    history = client.get("/uploads").json()
    assert [u["file_name"] for u in history] == ["b.csv", "a.csv"]
    assert history[0]["uploaded_by"] == "anonymous"


def test_upload_missing_headers(client):
    """Test an upload missing columns is rejected with the missing headers"""
    r = client.post(
        "/uploads",
        data={"file_type": "travel"},
        files={"file": ("travel.csv", "employee_id,destination,cost\nemp-101,Oslo,10\n", "text/csv")},
    )
    assert r.status_code == 400
    body = r.json()
    assert body["detail"] == "Missing required headers"
    assert body["missing_headers"] == ["departure_date", "return_date", "purpose"]
    assert client.get("/uploads").json() == []


def test_upload_rejects_non_csv(client):
    """Test non-CSV uploads are rejected"""
    r = client.post("/uploads", data={"file_type": "travel"}, files={"file": ("travel.xlsx", b"PK", "application/octet-stream")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Only CSV files are supported"


def test_upload_rejects_empty_file(client):
    """Test empty uploads are rejected"""
    r = client.post("/uploads", data={"file_type": "travel"}, files={"file": ("travel.csv", "", "text/csv")})
    assert r.status_code == 400
    assert r.json()["detail"] == "File is empty"


def test_upload_rejects_unknown_type(client):
    """Test uploads with an unknown file type are rejected"""
    r = client.post("/uploads", data={"file_type": "expenses"}, files={"file": ("x.csv", TRAVEL_CSV, "text/csv")})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid file type"
