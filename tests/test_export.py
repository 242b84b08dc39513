"""Tests for CSV and JSON export rendering."""

from dpr_api.data.export import CSV_HEADERS, format_flag, to_csv, to_json_payload

MEMBER = {
    "id": 7, "nama": "Ahmad Sahroni", "fraksi": "Fraksi Partai NasDem", "partai": "NasDem",
    "dapil": "DKI Jakarta III", "ttl": "Jakarta, 8 Agustus 1977", "agama": "Islam",
    "kota_lahir": "Jakarta", "usia": 47, "pendidikan_terakhir": "S2",
    "is_kader": "1", "is_dewan": "0",
}


def test_format_flag():
    assert format_flag("1") == "Ya"
    assert format_flag("0") == "Tidak"
    assert format_flag(None) == "Tidak"


def test_csv_header_row():
    assert to_csv([]) == ",".join(CSV_HEADERS) + "\n"
    assert to_csv([]).startswith("ID,Nama,Fraksi,Partai,Dapil,TTL,Agama,Kota Lahir,Usia,")


def test_legacy_csv_row():
    lines = to_csv([MEMBER]).split("\n")
    assert lines[1] == (
        '7,"Ahmad Sahroni","Fraksi Partai NasDem","NasDem","DKI Jakarta III",'
        '"Jakarta, 8 Agustus 1977","Islam","Jakarta",47,"S2",Ya,Tidak'
    )
    assert lines[2] == ""


def test_legacy_csv_missing_values():
    member = dict(MEMBER, ttl=None, usia=None, pendidikan_terakhir=None)
    row = to_csv([member]).split("\n")[1]
    assert ',"","Islam","Jakarta",,"",Ya,Tidak' in row


def test_legacy_csv_does_not_escape_quotes():
    member = dict(MEMBER, nama='Ahmad "Roni" Sahroni')
    row = to_csv([member]).split("\n")[1]
    assert row.startswith('7,"Ahmad "Roni" Sahroni",')


def test_strict_csv_escapes_quotes():
    member = dict(MEMBER, nama='Ahmad "Roni" Sahroni')
    row = to_csv([member], strict=True).split("\n")[1]
    assert row.startswith('7,"Ahmad ""Roni"" Sahroni",Fraksi Partai NasDem,')
    assert '"Jakarta, 8 Agustus 1977"' in row


def test_json_payload_count():
    payload = to_json_payload([MEMBER, MEMBER])
    assert payload["success"] is True
    assert payload["count"] == 2
    assert payload["data"][0]["nama"] == "Ahmad Sahroni"
