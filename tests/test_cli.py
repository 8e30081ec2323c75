from pathlib import Path

import pytest

from cli.main import BrigadeCLI, main

BISTRO = str(Path(__file__).resolve().parent.parent / "data" / "scenarios" / "bistro.yaml")


@pytest.fixture
def cli(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"log_level: WARNING\nmetrics:\n  output_dir: {tmp_path / 'metrics'}\n")
    return BrigadeCLI(str(config_path))


def test_run_prints_trace(cli, capsys):
    cli.run(BISTRO)
    out = capsys.readouterr().out
    assert "Pasta Station: Successfully prepared Spaghetti Bolognese." in out
    assert "Seafood Paella was not prepared." in out
    assert "Prepared 2 of 4 order attempts" in out
    assert "Still queued:\nSeafood Paella\nBeef Wellington" in out


def test_run_multiple_passes_and_export(cli, tmp_path, capsys):
    cli.run(BISTRO, passes=2, export=True, export_format="json")
    out = capsys.readouterr().out
    assert out.count("All dishes have been processed.") == 2
    assert "Prepared 2 of 6 order attempts" in out
    assert len(list((tmp_path / "metrics").glob("*.json"))) == 3


def test_stations(cli, capsys):
    cli.stations(BISTRO)
    out = capsys.readouterr().out
    assert "0. Grill Station [Grilled Chicken]" in out
    assert "Chicken: 2 @ $2.00" in out


def test_queue(cli, capsys):
    cli.queue(BISTRO)
    out = capsys.readouterr().out
    assert "Spaghetti Bolognese\nSeafood Paella" in out
    assert "Shrimp: 2" in out


def test_main_reports_errors(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["run", str(tmp_path / "missing.yaml")])
    assert exc.value.code == 1
    assert "Error: Scenario file not found" in capsys.readouterr().out
