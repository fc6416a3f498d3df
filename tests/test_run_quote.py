"""CLI harness (scripts/run_quote.py) with the offline mock provider."""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "run_quote.py"


@pytest.fixture
def run_quote():
    spec = importlib.util.spec_from_file_location("run_quote", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_json_output_for_sample_parcel(run_quote, capsys):
    code = run_quote.main(["04014", "13631009", "09951420", "1.5", "1", "18", "10", "10", "0", "--json", "--mock"])

    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["service_code"] == "04014"
    assert data["deadline_days"] == 3


def test_missing_origin_exits_non_zero(run_quote, capsys):
    code = run_quote.main(["04014", "", "09951420", "1.5", "1", "18", "10", "10", "0", "--json", "--mock"])

    assert code == 1
    assert json.loads(capsys.readouterr().out)["code"] == "origin_postal_code_required"
