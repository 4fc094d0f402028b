"""Tests for the command-line runner."""

import json
import sys

import pandas as pd
import pytest

from affinity import run

from tests.conftest import make_person


@pytest.fixture
def pair_payload():
    return {
        "subject": make_person(person_id="ana").to_dict(),
        "counterpart": make_person(person_id="luis").to_dict(),
        "context": "ejecución",
        "closeness": "cercano",
    }


def test_run_single(pair_payload):
    output = run.run_single(pair_payload)
    assert output["context"] == "execution"
    assert output["heat"] == 71
    assert output["composite"] == pytest.approx(95.4585)


def test_run_single_overrides(pair_payload):
    output = run.run_single(pair_payload, context="relaciones", closeness="far")
    assert output["context"] == "relationship"
    assert output["closeness"] == "far"


def test_run_single_missing_counterpart(pair_payload):
    pair_payload["counterpart"] = None
    output = run.run_single(pair_payload)
    assert output["available"] is False


def test_run_batch_writes_report(tmp_path):
    payload = {
        "subject": make_person(person_id="ana").to_dict(),
        "counterparts": [
            {"profile": make_person(person_id="luis").to_dict(), "closeness": "close"},
            {"profile": make_person(competency=80, person_id="marta").to_dict(), "closeness": "far"},
            {"profile": {}, "closeness": "close"},
        ],
        "context": "leadership",
    }
    report = tmp_path / "report.csv"
    output = run.run_batch(payload, report_path=str(report))

    assert output["summary"]["relationships"] == 2
    assert len(output["results"]) == 3
    assert output["results"][2]["available"] is False
    assert list(pd.read_csv(report)["counterpart_id"]) == ["luis", "marta"]


def test_main_prints_json(tmp_path, pair_payload, monkeypatch, capsys):
    path = tmp_path / "pair.json"
    path.write_text(json.dumps(pair_payload), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["affinity", "--input", str(path)])

    with pytest.raises(SystemExit) as exc:
        run.main()

    assert exc.value.code == 0
    assert json.loads(capsys.readouterr().out)["heat"] == 71


def test_main_unknown_contact_key(tmp_path, pair_payload, monkeypatch):
    pair_payload["counterpart"]["contact"] = {"fax": "555-0100"}
    path = tmp_path / "pair.json"
    path.write_text(json.dumps(pair_payload), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["affinity", "--input", str(path)])

    with pytest.raises(SystemExit) as exc:
        run.main()

    assert exc.value.code == 1


def test_main_missing_input(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["affinity", "--input", str(tmp_path / "nope.json")])
    with pytest.raises(SystemExit) as exc:
        run.main()
    assert exc.value.code == 1
