import json

from bidder_params.cli.main import main


def test_doctor_reports_bound_and_missing(schema_dir, placement_schema, tmp_path, capsys):
    d = schema_dir({"appnexus.json": placement_schema})
    out = tmp_path / "report.json"
    rc = main(["doctor", "--schema-dir", str(d), "--report-out", str(out)])
    assert rc == 0

    report = json.loads(out.read_text(encoding="utf-8"))
    assert report["summary"]["ok"] is True
    assert list(report["schemas"]) == ["appnexus"]
    assert report["schemas"]["appnexus"]["path"] == str((d / "appnexus.json").resolve())
    assert len(report["schemas"]["appnexus"]["sha256"]) == 64
    coverage = next(c for c in report["checks"] if c["name"] == "registry_coverage")
    assert "rubicon" in coverage["details"]["missing"]
    assert json.loads(capsys.readouterr().out) == report


def test_doctor_strict_fails_on_gaps(schema_dir, placement_schema):
    d = schema_dir({"appnexus.json": placement_schema})
    assert main(["doctor", "--schema-dir", str(d), "--strict"]) == 1


def test_doctor_fails_on_orphaned_schema(schema_dir, capsys):
    d = schema_dir({"unknownpartner.json": {"type": "object"}})
    assert main(["doctor", "--schema-dir", str(d)]) == 1
    report = json.loads(capsys.readouterr().out)
    assert report["checks"][0]["details"]["kind"] == "UnknownPartnerSchemaError"
