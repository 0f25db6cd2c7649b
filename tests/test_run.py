"""
Tests for the batch command line parser.
"""
import csv
import json

from sarkari.parser.run import main


def test_writes_jsonl_and_csv(tmp_path, ssc_cgl_notice, capsys):
    notice = tmp_path / "ssc_cgl.txt"
    notice.write_text(ssc_cgl_notice, encoding="utf-8")
    short = tmp_path / "short.txt"
    short.write_text("Result soon", encoding="utf-8")
    out_dir = tmp_path / "out"

    main([str(notice), str(short), str(notice), "--output", str(out_dir)])

    lines = (out_dir / "jobs.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["title"] == "SSC CGL 2026 Recruitment Notification"
    assert "state" not in record

    with (out_dir / "jobs.csv").open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["totalPosts"] == "5000"
    assert rows[0]["lastDate"] == "15/03/2026"
    assert rows[0]["type"] == "job"

    out = capsys.readouterr().out
    assert "Skipping" in out
    assert "Wrote 1 records" in out
