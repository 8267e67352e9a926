import json

from medcalc import cli


def test_calc_json(capsys):
    assert cli.main(["calc", "bmi", "weight=70", "height=175", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["calculator"] == "bmi"
    assert out["value"] == "22.9"
    assert out["interpretation"] == "Normal"
    assert out["inputs"] == {"weight": 70.0, "height": 175.0}


def test_calc_unknown_field(capsys):
    assert cli.main(["calc", "bmi", "bogus=1"]) == 1
    assert "no field 'bogus'" in capsys.readouterr().out


def test_calc_malformed_assignment(capsys):
    assert cli.main(["calc", "bmi", "weight"]) == 1
    assert "field=value" in capsys.readouterr().out


def test_list_by_specialty(capsys):
    assert cli.main(["list", "--specialty", "Pediatrics"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split()[0] for line in lines] == ["maintenance-fluids", "apgar"]


def test_list_no_match(capsys):
    assert cli.main(["list", "--search", "zzz"]) == 0
    assert "No calculators found." in capsys.readouterr().out


def test_show_unknown(capsys):
    assert cli.main(["show", "nope"]) == 1
    assert "Calculator 'nope' not found" in capsys.readouterr().out


def test_show_lists_choices(capsys):
    assert cli.main(["show", "centor"]) == 0
    out = capsys.readouterr().out
    assert "a: Age (choices: 15-44=0, 45+=-1, 3-14=1)" in out


def test_ask_uses_advisor(monkeypatch, capsys):
    class StubAdvisor:
        def __init__(self, calculators=None):
            self.calculators = calculators

        def ask(self, query):
            return f"Suggested for: {query}"

    monkeypatch.setattr(cli, "ClinicalAdvisor", StubAdvisor)
    assert cli.main(["ask", "burns"]) == 0
    assert "Suggested for: burns" in capsys.readouterr().out
